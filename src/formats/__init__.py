"""Line codecs for frecency interchange formats.

This package maps single lines of the autojump, simple CSV, full CSV,
and z formats to canonical records and back.
"""
