"""Conversation feature package: stored question/answer chats per account.

Every operation resolves the caller's email to an account id first and scopes
all further statements to that id.
"""
