"""
The dsn 'viewports' holds the conversions between the ways a viewport's position on a document can be expressed: as a
fraction of the scrollable range (what a scrollbar, or Kivy's ScrollView, deals in) and as a position in pixels from
the top of the document (what the positions dsn deals in).

Conversions always take the document and viewport sizes at the moment of conversion; a fraction that is stored and
later converted back after the document changed shape ends up somewhere else in the content. Keeping a position stable
across such changes is what the positions dsn is for.
"""
