"""
auth — Account authentication module.

Provides:
  • Credential store over the ``users`` table
  • Password hashing (bcrypt, cost 10)
  • Signed token issuance & verification
  • Register / Login / Me API routes
  • ``get_current_claims`` FastAPI dependency
"""
