"""
All sizes and positions are scalars along the vertical axis; positions are measured from the top of the document
downwards.

## Fractions

Viewport positions may be expressed fractionally in the document. Fractions are floats in the domain [0, 1], or None
(meaning: scrolling is impossible, because the viewport is larger than the document). This is how Kivy's ScrollView
thinks about scrolling (its `scroll_y`), be it upside down: there, 1 is the top.

## Positions

Positions are what the positions dsn thinks in: the number of pixels between the top of the document and the top of
the viewport. They are not rounded; the toolkit will draw at whatever pixel boundary it draws.
"""


def bounded_viewport(document_size, viewport_size, viewport_pos):
    """
    Returns a viewport pos inside the document, given a viewport that's potentially outside it.

    In-bounds, no effect is achieved by bounding:
    >>> bounded_viewport(500, 200, 250)
    250

    Any kind of scrolling is impossible if the viewport is larger than the document; we just show it at the top:
    >>> bounded_viewport(15, 1000, 45)
    0

    Above the top of the document there is nothing to be seen:
    >>> bounded_viewport(500, 200, -100)
    0

    Below the bottom of the document (below document_size) there is nothing to be seen:
    >>> bounded_viewport(500, 200, 400)
    300
    """

    if document_size < viewport_size:
        return 0

    if viewport_pos < 0:
        return 0

    return min(document_size - viewport_size, viewport_pos)


def document_fraction_for_viewport_position(document_size, viewport_size, viewport_position):
    """
    We take the top of the viewport, and calculate its relative position with respect to the possible positions it can
    be in (it cannot be lower than a viewport_size from the bottom).

    +--------------------+
    |Document            |
    |                    |
    +----------+   <------------lowest possible position of the top of the viewport, a.k.a. 100%
    |Viewport  |         |
    |          |         |
    +----------+---------+

    >>> document_fraction_for_viewport_position(500, 100, 100)
    0.25
    >>> document_fraction_for_viewport_position(50, 100, 0) is None
    True
    """

    if document_size <= viewport_size:
        return None

    return viewport_position / (document_size - viewport_size)


def viewport_position_for_document_fraction(document_size, viewport_size, document_fraction):
    """
    >>> viewport_position_for_document_fraction(500, 100, 0.25)
    100.0
    >>> viewport_position_for_document_fraction(50, 100, None)
    0
    """
    if document_fraction is None:
        # If scrolling is impossible, we put the viewport at the top.
        return 0

    return (document_size - viewport_size) * document_fraction
