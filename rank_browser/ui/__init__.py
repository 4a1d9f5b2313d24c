"""
Dash presentation layer: layout, component ids and callbacks that drive
the core DataView from browser events.
"""
