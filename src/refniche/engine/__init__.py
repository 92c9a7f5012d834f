"""
Engine layer: NSGA-III environmental selection building blocks.
"""
