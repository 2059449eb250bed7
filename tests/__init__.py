"""
Test suite for the Task Hub application.

This package contains:
- unit/: identifiers, validation, models, services and the client SDK
- integration/: REST API tests through the Flask test client
- contracts/: responses checked against contracts/openapi.yaml
- security/: injection and mass-assignment probes
- smoke/: checks against a live server (needs TEST_BASE_URL)
- performance/: Locust load scenarios
"""
