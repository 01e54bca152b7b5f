"""
Tests for groups app.

Test structure:
- test_models.py: Model tests (helpers, constraints, cascades)
- test_permissions.py: Role resolution and the permission matrix
- test_services.py: Service layer tests (business logic)
- test_api.py: API endpoint tests
- test_integration.py: Integration tests (complete workflows)

Run all tests:
    pytest groups

Run a specific test class:
    pytest groups/tests/test_services.py::MembershipServiceTests
"""
