"""Routing: path templates compiled into matchers.

A template is tokenised once at construction; matching, parsing and
compiling all read that immutable token list.
"""
