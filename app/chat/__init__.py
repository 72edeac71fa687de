"""
Chat app.

Owns conversations, participants and messages. The notifications app reads
these rows to fan out message pushes; nothing here sends pushes itself.

Usage:
    from chat.models import Conversation, Participant, Message
"""
