"""Service layer: the voucher rule engine and its result envelope.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
