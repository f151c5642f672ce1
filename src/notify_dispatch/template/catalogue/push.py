"""Push templates (title + body)."""

from __future__ import annotations

from ...delivery import NotificationEvent as E
from ..engine import ChannelTemplate

PUSH_TEMPLATES: dict[E, ChannelTemplate] = {
    E.USER_REGISTERED: ChannelTemplate(
        title="Welcome to SRJ!", body="Your account has been created successfully."
    ),
    E.OTP_SENT: ChannelTemplate(
        title="Your OTP Code",
        body="Your OTP is {{ v.get('otp') }}. "
        "Valid for {{ v.get('expiryMinutes', '10') }} min.",
    ),
    E.OTP_VERIFIED: ChannelTemplate(
        title="OTP Verified", body="Your OTP has been verified successfully."
    ),
    E.PASSWORD_RESET_REQUESTED: ChannelTemplate(
        title="Password Reset Request",
        body="Your password reset OTP is {{ v.get('otp') }}. "
        "Valid for {{ v.get('expiryMinutes', '10') }} min.",
    ),
    E.PASSWORD_RESET_SUCCESS: ChannelTemplate(
        title="Password Reset Successful",
        body="Your password has been reset successfully.",
    ),
    E.CONTACT_US_SUBMITTED: ChannelTemplate(
        title="Message Received", body="We have received your message and will respond soon."
    ),
    E.ENQUIRY_SENT: ChannelTemplate(
        title="Enquiry Sent",
        body="Your enquiry has been sent to {{ v.get('recipientName', 'the recipient') }}.",
    ),
    E.ENQUIRY_RESPONSE: ChannelTemplate(
        title="New Enquiry Response",
        body="{{ v.get('responderName', 'Someone') }} has responded to your enquiry.",
    ),
    E.ADMIN_MESSAGE: ChannelTemplate(
        title="{{ v.get('title', 'Message from Admin') }}",
        body="{{ v.get('message', 'You have a new message.') }}",
    ),
    E.PARTNER_APPROVED: ChannelTemplate(
        title="Partner Application Approved", body="Access your partner dashboard now."
    ),
    E.PARTNER_REJECTED: ChannelTemplate(
        title="Partner Application Status", body="Your application status has been updated."
    ),
    E.DEALER_APPROVED: ChannelTemplate(
        title="Dealer Application Approved", body="Access your dealer dashboard now."
    ),
    E.DEALER_REJECTED: ChannelTemplate(
        title="Dealer Application Status", body="Your application status has been updated."
    ),
    E.SYSTEM_UPDATE: ChannelTemplate(
        title="{{ v.get('title', 'System Update') }}",
        body="{{ v.get('message', 'Check app for details.') }}",
    ),
    E.PROMOTIONAL: ChannelTemplate(
        title="{{ v.get('title', 'Special Offer') }}",
        body="{{ v.get('message', 'Special offer for you!') }}",
    ),
    E.PAYMENT_SUCCESS: ChannelTemplate(
        title="Payment Successful",
        body="Payment of {{ v.get('amount') }} for {{ v.get('service', 'service') }} successful.",
    ),
    E.PAYMENT_FAILED: ChannelTemplate(
        title="Payment Failed",
        body="Payment of {{ v.get('amount') }} failed. "
        "Reason: {{ v.get('reason', 'Payment error') }}.",
    ),
    E.PAYMENT_PENDING: ChannelTemplate(
        title="Payment Pending", body="Payment of {{ v.get('amount') }} is being processed."
    ),
}
