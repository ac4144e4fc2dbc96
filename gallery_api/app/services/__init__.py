"""
Service layer abstraction.

Services encapsulate the query logic so that API handlers only deal
with routing and response mapping.
"""
