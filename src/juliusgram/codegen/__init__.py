"""
Code generation: pattern AST -> Julius grammar and vocabulary text.
"""

from .julius import JuliusCodeGenerator, GeneratedText, generate, grammar_line, voca_block

__all__ = ["JuliusCodeGenerator", "GeneratedText", "generate", "grammar_line", "voca_block"]
