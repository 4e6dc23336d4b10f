"""
Root conftest.py: prepares the environment for importing Kivy under pytest.

Kivy parses sys.argv on import (pytest's own options would make it bail out), writes a config file and log files to
~/.kivy, and logs to the console; none of that is wanted while testing.
"""
import os

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONFIG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
