"""
Batch entry points: attendance ledger creation, paid leave acquisition, paid leave grant
"""
