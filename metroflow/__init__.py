"""Top-level package for the MetroFlow route optimizer.

MetroFlow loads a metro network from a CSV edge list and answers
route queries between two stations, optimizing for the fewest stops,
the least cumulative cost or the least cumulative time.
"""
