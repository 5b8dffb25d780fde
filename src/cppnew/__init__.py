"""cppnew - scaffold ready-to-build C++/CMake projects."""

__version__ = "0.1.0"
