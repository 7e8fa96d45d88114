"""toyrobot — toy robot simulator on a bounded square grid."""

__version__ = "0.1.0"
