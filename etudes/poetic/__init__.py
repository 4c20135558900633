"""Weighted directed graphs and a poet that bridges words with them."""