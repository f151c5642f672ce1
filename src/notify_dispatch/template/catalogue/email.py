"""Email templates: subject, plain-text body and HTML body per event."""

from __future__ import annotations

from ...delivery import NotificationEvent as E
from ..engine import ChannelTemplate


def _html(content: str) -> str:
    return '{% extends "email_layout.html" %}{% block content %}' + content + "{% endblock %}"


_NAME = "{{ v.get('name', 'User') }}"
_OTP_HTML = (
    "<p>Your OTP code is: <strong class=\"code\">{{ v.get('otp') }}</strong></p>"
    "<p>This code will expire in {{ v.get('expiryMinutes', '10') }} minutes.</p>"
)
_OTP_TEXT = (
    "Your OTP code is: {{ v.get('otp') }}\n\n"
    "This code will expire in {{ v.get('expiryMinutes', '10') }} minutes.\n\n"
)


def _rejected(kind: str) -> ChannelTemplate:
    name = f"{{{{ v.get('name', '{kind}') }}}}"
    return ChannelTemplate(
        subject=f"{kind} Application Status",
        body=(
            f"Application Status Update\n\nHello {name},\n\n"
            f"Unfortunately, your {kind.lower()} application could not be approved "
            "at this time.\n\n"
            "{% if v.get('reason') %}Reason: {{ v.get('reason') }}\n\n{% endif %}"
            "Please contact support if you have any questions."
        ),
        html=_html(
            f"<h2>Application Status Update</h2><p>Hello {name},</p>"
            f"<p>Unfortunately, your {kind.lower()} application could not be approved "
            "at this time.</p>"
            "{% if v.get('reason') %}<p><strong>Reason:</strong> {{ v.get('reason') }}</p>"
            "{% endif %}"
            "<p>Please contact support if you have any questions.</p>"
        ),
    )


def _approved(kind: str) -> ChannelTemplate:
    name = f"{{{{ v.get('name', '{kind}') }}}}"
    return ChannelTemplate(
        subject=f"{kind} Application Approved",
        body=(
            f"{kind} Application Approved\n\nHello {name},\n\n"
            f"Your {kind.lower()} application has been approved.\n\n"
            f"You can now access your {kind.lower()} dashboard."
        ),
        html=_html(
            f"<h2>Congratulations!</h2><p>Hello {name},</p>"
            f"<p>Your {kind.lower()} application has been approved.</p>"
            f"<p>You can now access your {kind.lower()} dashboard and start managing "
            "your profile.</p>"
        ),
    )


def _announcement(default_title: str) -> ChannelTemplate:
    title = f"{{{{ v.get('title', '{default_title}') }}}}"
    return ChannelTemplate(
        subject=f"{{{{ v.get('subject', '{default_title}') }}}}",
        body=f"{title}\n\nHello {_NAME},\n\n{{{{ v.get('message') }}}}",
        html=_html(f"<h2>{title}</h2><p>Hello {_NAME},</p><p>{{{{ v.get('message') }}}}</p>"),
    )


EMAIL_TEMPLATES: dict[E, ChannelTemplate] = {
    E.USER_REGISTERED: ChannelTemplate(
        subject="Welcome to Shree Om!",
        body=(
            f"Welcome to Shree Om!\n\nHello {_NAME},\n\n"
            "Thank you for registering with Shree Om. "
            "Your account has been successfully created.\n\n"
            "You can now explore our platform and connect with partners and dealers.\n\n"
            "If you have any questions, feel free to contact our support team."
        ),
        html=_html(
            f"<h1>Welcome to Shree Om!</h1><p>Hello {_NAME},</p>"
            "<p>Thank you for registering with Shree Om. "
            "Your account has been successfully created.</p>"
            "<p>You can now explore our platform and connect with partners and dealers.</p>"
            "<p>If you have any questions, feel free to contact our support team.</p>"
        ),
    ),
    E.OTP_SENT: ChannelTemplate(
        subject="Your OTP Code",
        body=(
            f"OTP Verification Code\n\nHello {_NAME},\n\n{_OTP_TEXT}"
            "If you didn't request this code, please ignore this email."
        ),
        html=_html(
            f"<h2>OTP Verification Code</h2><p>Hello {_NAME},</p>{_OTP_HTML}"
            "<p>If you didn't request this code, please ignore this email.</p>"
        ),
    ),
    E.OTP_VERIFIED: ChannelTemplate(
        subject="OTP Verified Successfully",
        body=(
            f"OTP Verified\n\nHello {_NAME},\n\n"
            "Your OTP has been verified successfully.\n\n"
            "Your account is now active and ready to use."
        ),
        html=_html(
            f"<h2>OTP Verified</h2><p>Hello {_NAME},</p>"
            "<p>Your OTP has been verified successfully.</p>"
            "<p>Your account is now active and ready to use.</p>"
        ),
    ),
    E.PASSWORD_RESET_REQUESTED: ChannelTemplate(
        subject="Password Reset Request",
        body=(
            f"Password Reset Request\n\nHello {_NAME},\n\n"
            f"We received a request to reset your password.\n\n{_OTP_TEXT}"
            "If you didn't request this, please ignore this email."
        ),
        html=_html(
            f"<h2>Password Reset Request</h2><p>Hello {_NAME},</p>"
            f"<p>We received a request to reset your password.</p>{_OTP_HTML}"
            "<p>If you didn't request this, please ignore this email.</p>"
        ),
    ),
    E.PASSWORD_RESET_SUCCESS: ChannelTemplate(
        subject="Password Reset Successful",
        body=(
            f"Password Reset Successful\n\nHello {_NAME},\n\n"
            "Your password has been reset successfully.\n\n"
            "If you didn't make this change, please contact support immediately."
        ),
        html=_html(
            f"<h2>Password Reset Successful</h2><p>Hello {_NAME},</p>"
            "<p>Your password has been reset successfully.</p>"
            "<p>If you didn't make this change, please contact support immediately.</p>"
        ),
    ),
    E.CONTACT_US_SUBMITTED: ChannelTemplate(
        subject="Thank you for contacting us",
        body=(
            f"Thank you for contacting us\n\nHello {_NAME},\n\n"
            "We have received your message and will get back to you soon.\n\n"
            "Subject: {{ v.get('subject') }}\nMessage: {{ v.get('message') }}"
        ),
        html=_html(
            f"<h2>Thank you for contacting us</h2><p>Hello {_NAME},</p>"
            "<p>We have received your message and will get back to you soon.</p>"
            "<p><strong>Subject:</strong> {{ v.get('subject') }}</p>"
            "<p><strong>Message:</strong> {{ v.get('message') }}</p>"
        ),
    ),
    E.ENQUIRY_SENT: ChannelTemplate(
        subject="Enquiry Sent Successfully",
        body=(
            f"Enquiry Sent\n\nHello {_NAME},\n\n"
            "Your enquiry has been sent to {{ v.get('recipientName', 'the recipient') }}.\n\n"
            "Topic: {{ v.get('topic') }}\n\n"
            "You will be notified when they respond."
        ),
        html=_html(
            f"<h2>Enquiry Sent</h2><p>Hello {_NAME},</p>"
            "<p>Your enquiry has been sent to "
            "{{ v.get('recipientName', 'the recipient') }}.</p>"
            "<p><strong>Topic:</strong> {{ v.get('topic') }}</p>"
            "<p>You will be notified when they respond.</p>"
        ),
    ),
    E.ENQUIRY_RESPONSE: ChannelTemplate(
        subject="New Response to Your Enquiry",
        body=(
            f"New Response to Your Enquiry\n\nHello {_NAME},\n\n"
            "{{ v.get('responderName', 'Someone') }} has responded to your enquiry.\n\n"
            "Response: {{ v.get('response') }}\n\n"
            "View Enquiry: {{ v.get('link', '#') }}"
        ),
        html=_html(
            f"<h2>New Response to Your Enquiry</h2><p>Hello {_NAME},</p>"
            "<p>{{ v.get('responderName', 'Someone') }} has responded to your enquiry.</p>"
            "<p><strong>Response:</strong></p><p>{{ v.get('response') }}</p>"
            "<p><a href=\"{{ v.get('link', '#') }}\">View Enquiry</a></p>"
        ),
    ),
    E.ADMIN_MESSAGE: _announcement("Message from Admin"),
    E.PARTNER_APPROVED: _approved("Partner"),
    E.PARTNER_REJECTED: _rejected("Partner"),
    E.DEALER_APPROVED: _approved("Dealer"),
    E.DEALER_REJECTED: _rejected("Dealer"),
    E.SYSTEM_UPDATE: _announcement("System Update"),
    E.PROMOTIONAL: _announcement("Special Offer"),
    E.PAYMENT_SUCCESS: ChannelTemplate(
        subject="Payment Successful",
        body=(
            f"Payment Successful\n\nHello {_NAME},\n\n"
            "Your payment of {{ v.get('amount') }} for {{ v.get('service') }} "
            "has been processed successfully.\n\n"
            "Payment ID: {{ v.get('paymentId') }}\n\n"
            "You now have access to the purchased service."
        ),
        html=_html(
            f"<h2>Payment Successful</h2><p>Hello {_NAME},</p>"
            "<p>Your payment of <strong>{{ v.get('amount') }}</strong> for "
            "<strong>{{ v.get('service') }}</strong> has been processed successfully.</p>"
            "<p>Payment ID: {{ v.get('paymentId') }}</p>"
            "<p>You now have access to the purchased service.</p>"
            "<p><a href=\"{{ v.get('link', '#') }}\">View Payment Details</a></p>"
        ),
    ),
    E.PAYMENT_FAILED: ChannelTemplate(
        subject="Payment Failed",
        body=(
            f"Payment Failed\n\nHello {_NAME},\n\n"
            "Unfortunately, your payment of {{ v.get('amount') }} for "
            "{{ v.get('service') }} could not be processed.\n\n"
            "Reason: {{ v.get('reason', 'Payment gateway error') }}\n\n"
            "Please try again or contact support."
        ),
        html=_html(
            f"<h2>Payment Failed</h2><p>Hello {_NAME},</p>"
            "<p>Unfortunately, your payment of <strong>{{ v.get('amount') }}</strong> for "
            "<strong>{{ v.get('service') }}</strong> could not be processed.</p>"
            "<p>Reason: {{ v.get('reason', 'Payment gateway error') }}</p>"
            "<p>Please try again or contact support if the issue persists.</p>"
            "<p><a href=\"{{ v.get('link', '#') }}\">Retry Payment</a></p>"
        ),
    ),
    E.PAYMENT_PENDING: ChannelTemplate(
        subject="Payment Pending",
        body=(
            f"Payment Pending\n\nHello {_NAME},\n\n"
            "Your payment of {{ v.get('amount') }} for {{ v.get('service') }} "
            "is being processed.\n\n"
            "We will notify you once the payment is confirmed."
        ),
        html=_html(
            f"<h2>Payment Pending</h2><p>Hello {_NAME},</p>"
            "<p>Your payment of <strong>{{ v.get('amount') }}</strong> for "
            "<strong>{{ v.get('service') }}</strong> is being processed.</p>"
            "<p>We will notify you once the payment is confirmed.</p>"
        ),
    ),
}
