"""
API test package for Task Hub.

This package contains tests for the REST API endpoints.
Tests use the Flask test client and demonstrate:
- CRUD operation testing for users and tasks
- Input validation testing
- Store failure handling
"""
