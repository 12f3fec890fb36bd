"""
Contact Enquiries App

Handles contact-form enquiries from the college website:
- Public enquiry submission with field validation
- Listing and reading stored enquiries
- Email notification to the college mailbox
"""
