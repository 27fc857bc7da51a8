"""
Service layer abstraction.

Each service encapsulates the business logic for a domain so that the
API handlers stay thin.  Services raise ``BadRequestError`` for input
the API must reject.
"""
