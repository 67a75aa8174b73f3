"""
Test suite for adventure-path

Contains:
- tests/unit/          : Unit tests for tokenizer, displacement math,
                         report contract, menu and CLI
"""
