"""
Core domain models, tokenizer, and displacement math.

This module contains the foundational building blocks that are independent
of any user interface (console, scripted input, JSON output).
"""
