"""Short SMS templates; every body must stay within 160 characters."""

from __future__ import annotations

from ...delivery import NotificationEvent as E
from ..engine import ChannelTemplate

SMS_TEMPLATES: dict[E, ChannelTemplate] = {
    E.OTP_SENT: ChannelTemplate(
        body="Your SRJ OTP is {{ v.get('otp') }}. "
        "Valid for {{ v.get('expiryMinutes', '10') }} min. Do not share."
    ),
    E.OTP_VERIFIED: ChannelTemplate(
        body="Your OTP has been verified successfully. Welcome to SRJ!"
    ),
    E.PASSWORD_RESET_REQUESTED: ChannelTemplate(
        body="Your SRJ password reset OTP is {{ v.get('otp') }}. "
        "Valid for {{ v.get('expiryMinutes', '10') }} min."
    ),
    E.PASSWORD_RESET_SUCCESS: ChannelTemplate(
        body="Your SRJ password has been reset successfully. "
        "If you didn't do this, contact support immediately."
    ),
    E.USER_REGISTERED: ChannelTemplate(
        body="Welcome to SRJ! Your account has been created successfully. Start exploring now."
    ),
    E.CONTACT_US_SUBMITTED: ChannelTemplate(
        body="Thank you for contacting SRJ. "
        "We have received your message and will respond soon."
    ),
    E.ENQUIRY_SENT: ChannelTemplate(
        body="Your enquiry has been sent to {{ v.get('recipientName', 'the recipient') }}. "
        "You'll be notified when they respond."
    ),
    E.ENQUIRY_RESPONSE: ChannelTemplate(
        body="New response to your enquiry from {{ v.get('responderName', 'someone') }}. "
        "Check your app for details."
    ),
    E.ADMIN_MESSAGE: ChannelTemplate(
        body="SRJ: {{ v.get('message', 'You have a new message. Check your app for details.') }}"
    ),
    E.PARTNER_APPROVED: ChannelTemplate(
        body="Congratulations! Your SRJ partner application has been approved. "
        "Access your dashboard now."
    ),
    E.PARTNER_REJECTED: ChannelTemplate(
        body="Your SRJ partner application status has been updated. "
        "Please check your email or app for details."
    ),
    E.DEALER_APPROVED: ChannelTemplate(
        body="Congratulations! Your SRJ dealer application has been approved. "
        "Access your dashboard now."
    ),
    E.DEALER_REJECTED: ChannelTemplate(
        body="Your SRJ dealer application status has been updated. "
        "Please check your email or app for details."
    ),
    E.SYSTEM_UPDATE: ChannelTemplate(
        body="SRJ Update: "
        "{{ v.get('message', 'System update notification. Check app for details.') }}"
    ),
    E.PROMOTIONAL: ChannelTemplate(
        body="SRJ: {{ v.get('message', 'Special offer for you! Check app for details.') }}"
    ),
    E.PAYMENT_SUCCESS: ChannelTemplate(
        body="SRJ: Payment of {{ v.get('amount') }} for {{ v.get('service', 'service') }} "
        "successful. Payment ID: {{ v.get('paymentId') }}"
    ),
    E.PAYMENT_FAILED: ChannelTemplate(
        body="SRJ: Payment of {{ v.get('amount') }} failed. "
        "Reason: {{ v.get('reason', 'Payment error') }}. Please retry."
    ),
    E.PAYMENT_PENDING: ChannelTemplate(
        body="SRJ: Payment of {{ v.get('amount') }} is being processed. "
        "You'll be notified once confirmed."
    ),
}
