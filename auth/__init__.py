"""
auth — User authentication module.

Provides:
  • JWT creation & verification (PyJWT, HS256)
  • Password hashing (bcrypt, work factor 10)
  • ``CredentialIssuer`` for register / login
  • ``TokenVerifier`` and the ``get_current_user`` FastAPI dependency
  • Register / Login / Logout / Verify-token API routes
"""
