"""Classic algorithm and data-structure drills: searching, bit tricks, lists, trees and more."""

__version__ = "0.1.0"