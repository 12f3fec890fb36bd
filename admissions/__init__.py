"""
Admissions App

Handles admission applications submitted through the college website:
- Public application submission with field validation
- Listing (filterable by course and status) and reading applications
- Email notification to the college mailbox
"""
