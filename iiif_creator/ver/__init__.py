__version__ = "1.0.0"
__specver__ = "3.0"
