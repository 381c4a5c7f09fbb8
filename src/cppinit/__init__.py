"""cppinit -- scaffold modern CMake projects for C and C++."""

__version__ = "0.1.0"
