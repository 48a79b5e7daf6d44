"""
Food Ledger
===========
Supply-chain provenance contract for food products over a
transactional key-value world state.
"""
