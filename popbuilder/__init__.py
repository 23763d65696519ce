"""
Population Builder - aggregate population estimates for small areas in Great Britain.
"""
