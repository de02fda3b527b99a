"""Classic algorithms: knapsack, sorting, permutations, N-Queens, graphs, and a command to run them."""

__version__ = "0.1.0"