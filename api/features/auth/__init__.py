"""Auth feature package: signup and login against the ``users`` table.

Authentication is stateless: a successful login returns a confirmation only
and no session or token is issued.
"""
