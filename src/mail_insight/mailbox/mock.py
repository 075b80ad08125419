from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List

from mail_insight.models import ConnectedEmail

# (id, subject, from, hours ago, preview, body, important)
_MOCK_MESSAGES = [
    (
        "mock-email-1",
        "Your Flight Confirmation - NYC to SFO",
        "American Airlines <reservations@aa.com>",
        24,
        "Thank you for booking your flight with American Airlines. Your confirmation code is: AA123456",
        """Dear Passenger,

Thank you for booking your flight with American Airlines.

Flight Details:
- Confirmation Code: AA123456
- Flight: AA 1234
- Date: June 15, 2023
- Departure: JFK 10:30 AM
- Arrival: SFO 1:45 PM
- Passenger: John Doe
- Seat: 14A (Economy Plus)

Please arrive at the airport at least 2 hours before your scheduled departure.
You can check in online 24 hours before your flight at aa.com.

Thank you for choosing American Airlines.""",
        True,
    ),
    (
        "mock-email-2",
        "Urgent: Security Alert - Password Reset Required",
        "Apple Security <no-reply@apple.com>",
        1,
        "We detected unusual activity on your Apple ID. Please reset your password immediately.",
        """Dear Customer,

We detected unusual sign-in activity on your Apple ID from a device in Moscow, Russia on May 10, 2023 at 3:42 PM.

If this wasn't you, your account may have been compromised. Please reset your password immediately by clicking the link below:

https://appleid.apple.com/reset

Your security code is: 847291

If you recognize this activity, you can ignore this email.

Apple Security Team""",
        True,
    ),
    (
        "mock-email-3",
        "Your Amazon Order #112-5837942-7539248 has shipped",
        "Amazon.com <ship-confirm@amazon.com>",
        48,
        "Your package is on its way! Track your shipment to see the delivery date.",
        """Hello,

Your Amazon order #112-5837942-7539248 has shipped.

Your order was sent to:
John Doe
123 Main St
Anytown, CA 94321

Your package is being shipped by UPS and the tracking number is 1Z999AA10123456789.
Estimated delivery date: May 12, 2023

Your order includes:
1. Sony WH-1000XM4 Wireless Noise Canceling Headphones - $348.00
2. USB C Charger Cable (6ft) - $12.99

Order Total: $360.99

Track your package: https://www.amazon.com/track

Thank you for shopping with Amazon!""",
        False,
    ),
    (
        "mock-email-4",
        "Team Meeting - Project Roadmap Discussion",
        "Sarah Johnson <sarah.j@company.com>",
        12,
        "Hi team, Let's meet tomorrow at 2 PM to discuss the Q3 roadmap and feature prioritization.",
        """Hi team,

I'd like to schedule a meeting for tomorrow at 2 PM in Conference Room A to discuss our Q3 roadmap.

Agenda:
1. Review Q2 accomplishments
2. Discuss feature prioritization for Q3
3. Resource allocation
4. Timeline adjustments

Please come prepared with your team's updates and priorities. If you can't attend in person, here's the Zoom link:
https://zoom.us/j/123456789

Looking forward to our discussion!

Best,
Sarah Johnson
Product Manager
(555) 123-4567""",
        True,
    ),
    (
        "mock-email-5",
        "Your Monthly Invoice from Spotify",
        "Spotify <no-reply@spotify.com>",
        72,
        "Your Spotify Premium subscription has been renewed. Here's your receipt.",
        """Hello,

Thanks for being a Spotify Premium subscriber!

Your monthly subscription has been renewed successfully.

Invoice Details:
- Date: May 8, 2023
- Invoice #: SP-2023-05087642
- Plan: Spotify Premium Individual
- Amount: $9.99
- Payment Method: Visa ending in 4321

Your next billing date will be June 8, 2023.

You can view your complete billing history in your account settings.

Enjoy your music!
The Spotify Team""",
        False,
    ),
    (
        "mock-email-6",
        "Job Application Update - Software Developer Position",
        "TechCorp Recruiting <recruiting@techcorp.com>",
        2,
        "Thank you for your application. We would like to invite you for an interview next week.",
        """Dear Applicant,

Thank you for applying for the Senior Software Developer position at TechCorp.

We were impressed with your qualifications and experience, and we would like to invite you for a virtual interview. Please select a time slot that works for you:

- Monday, May 15, 10:00 AM - 11:30 AM PST
- Tuesday, May 16, 2:00 PM - 3:30 PM PST
- Wednesday, May 17, 11:00 AM - 12:30 PM PST

Please reply to this email with your preferred time slot, and we will send you the meeting details.

Best regards,
Jennifer Smith
Recruiting Manager
TechCorp""",
        True,
    ),
]


class MockMailbox:
    """Offline mailbox with a fixed set of realistic messages."""

    def __init__(self, now: datetime | None = None) -> None:
        self._now = now

    def fetch_recent(self, count: int = 10) -> List[ConnectedEmail]:
        now = self._now or datetime.now(timezone.utc)
        emails: List[ConnectedEmail] = []
        for msg_id, subject, sender, hours_ago, preview, body, important in _MOCK_MESSAGES[: max(0, count)]:
            emails.append(
                ConnectedEmail(
                    id=msg_id,
                    subject=subject,
                    from_addr=sender,
                    date=(now - timedelta(hours=hours_ago)).isoformat(),
                    preview=preview,
                    body=body,
                    important=important,
                )
            )
        return emails
