"""
Tests for custom exception classes and the error response format
"""

import json

from fastapi import status

from article_cms.exception_handlers import (
    create_error_response,
    get_error_type,
    get_http_error_code,
)
from article_cms.exceptions import (
    ArticleNotFoundError,
    CMSException,
    DatabaseError,
    DuplicateResourceError,
    ErrorCode,
    ResourceNotFoundError,
    ValidationError,
)


class TestCMSException:
    """Test base CMSException class"""

    def test_defaults(self):
        exc = CMSException("Test error")
        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.details == {}
        assert exc.error_code == ErrorCode.INTERNAL_ERROR

    def test_custom_status_and_details(self):
        exc = CMSException("Bad", status_code=status.HTTP_400_BAD_REQUEST, details={"count": 2})
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.details == {"count": 2}


class TestNotFoundExceptions:
    def test_resource_without_id(self):
        exc = ResourceNotFoundError("Post")
        assert exc.message == "Post not found"
        assert exc.status_code == status.HTTP_404_NOT_FOUND

    def test_article_not_found(self):
        exc = ArticleNotFoundError("hello-world")
        assert exc.message == "Article with id 'hello-world' not found"
        assert exc.status_code == status.HTTP_404_NOT_FOUND
        assert exc.details == {"resource_type": "Article", "resource_id": "hello-world"}
        assert exc.error_code == ErrorCode.RESOURCE_ARTICLE_NOT_FOUND
        assert isinstance(exc, ResourceNotFoundError)


class TestWriteExceptions:
    def test_validation_error_with_field(self):
        exc = ValidationError("Article slug cannot be empty", field="slug")
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.details == {"field": "slug"}
        assert exc.error_code == ErrorCode.VALIDATION_FAILED

    def test_duplicate_resource(self):
        exc = DuplicateResourceError("Article", "slug", "taken")
        assert exc.message == "Article with slug 'taken' already exists"
        assert exc.status_code == status.HTTP_409_CONFLICT
        assert exc.error_code == ErrorCode.VALIDATION_DUPLICATE_RESOURCE

    def test_database_error(self):
        exc = DatabaseError(operation="update")
        assert exc.message == "A database error occurred"
        assert exc.details == {"operation": "update"}
        assert exc.error_code == ErrorCode.DATABASE_ERROR

    def test_database_error_without_operation(self):
        assert DatabaseError().details == {}


class TestErrorResponse:
    def test_full_body(self):
        response = create_error_response(
            status_code=404,
            message="Article with id 'x' not found",
            error_code=ErrorCode.RESOURCE_ARTICLE_NOT_FOUND,
            details={"resource_id": "x"},
            path="/api/v1/articles/x",
        )
        body = json.loads(response.body)

        assert response.status_code == 404
        assert body == {
            "error": {
                "status_code": 404,
                "message": "Article with id 'x' not found",
                "type": "Not Found",
                "error_code": "RESOURCE_ARTICLE_NOT_FOUND",
                "details": {"resource_id": "x"},
                "path": "/api/v1/articles/x",
            }
        }

    def test_optional_fields_omitted(self):
        body = json.loads(create_error_response(status_code=500, message="Boom").body)
        assert body == {"error": {"status_code": 500, "message": "Boom", "type": "Internal Server Error"}}

    def test_error_types(self):
        assert get_error_type(409) == "Conflict"
        assert get_error_type(418) == "Error"

    def test_http_error_codes(self):
        assert get_http_error_code(404) == "RESOURCE_NOT_FOUND"
        assert get_http_error_code(422) == "VALIDATION_FAILED"
        assert get_http_error_code(418) == "UNKNOWN_ERROR"
