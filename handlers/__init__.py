"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives updates from Telegram,
delegates to the appropriate Service, and sends the response back to the chat.
Services are looked up in `context.bot_data`; no business logic lives here.
"""
