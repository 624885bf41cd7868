"""Classic algorithms and data structures: sorting, searching, number and
string puzzles, arrays, backtracking, graphs, containers, linked lists and trees."""

__version__ = "0.1.0"