"""auth/ -- Password-based AuthProvider: user store, bcrypt hashes, JWTs.

Layer rule: auth/ imports only stdlib, third-party libraries, and core.config.
It does NOT import from api/. core/ never imports from auth/; the login router
only sees PasswordAuthProvider through the core.auth_provider protocol.
"""
