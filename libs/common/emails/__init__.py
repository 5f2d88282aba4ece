"""
Veloce email package.

Modules:
- core: EmailMessage, the MailTransport protocol and the SMTP transport
- client: lazily created, swappable process-wide transport
- store: order and contact-form notifications
"""
