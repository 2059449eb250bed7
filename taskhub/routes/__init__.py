"""
Routes package for the Task Hub application.

This package contains route blueprints:
- api: REST API endpoints for users and tasks
"""
