"""Maven Toys retail backend: stores, employees, products, categories and sales."""

__version__ = "0.1.0"
