"""
Service layer abstraction.

Services take an open ``Database`` and encapsulate the queries behind
each endpoint, so API handlers never build SQL themselves.
"""
