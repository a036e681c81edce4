"""
Test suite for the contact desk backend.

- test_submit.py / test_admin_auth.py / test_admin_submissions.py - HTTP API
- test_rate_limit.py - request-count limiting, unit and API level
- test_logging.py - logging configuration per application
- test_*_service.py / test_submission_repository.py - component tests
"""
