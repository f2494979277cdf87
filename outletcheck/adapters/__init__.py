"""Adapter package for concrete lookup and classification implementations.

Purpose:
    Provide implementations of the domain ports: reflective attribute access,
    property-bag access, and widget classifiers for plain Python objects and
    tkinter widgets.

Dependencies:
    ``tk_widgets`` depends on ``tkinter``; the other modules use only domain
    definitions.

Call context:
    Imported by ``outletcheck.assertions`` for default wiring and by tests.
"""
