"""
Patterns Engine Package
Catalogue : Command -> Memento -> Active Object (+ Factory, Visitor, Proxy)
"""
