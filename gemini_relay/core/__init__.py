"""Core relay package.

Composition:
    - `engine`: request pipeline (validate, forward, shape the reply).
    - `relay_types`: reply value and the two error kinds.
"""
