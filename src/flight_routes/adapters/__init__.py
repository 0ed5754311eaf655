"""
Adapter implementations for Flight Routes.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of storage backends and algorithms.
"""
