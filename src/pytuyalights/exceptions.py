"""Custom exceptions for pytuyalights library."""

from __future__ import annotations

from typing import Any


class TuyaLightsError(Exception):
    """Base exception for all pytuyalights errors."""


class TransportError(TuyaLightsError):
    """Exception raised when the underlying HTTP call fails."""


class TuyaConnectionError(TransportError):
    """Exception raised for connection failures."""


class TuyaTimeoutError(TransportError):
    """Exception raised when API requests timeout."""


class TuyaHttpStatusError(TransportError):
    """Exception raised when the API answers with an HTTP error status.

    Attributes:
        status: HTTP status code returned by the API.
    """

    def __init__(self, message: str = "", status: int | None = None) -> None:
        """Initialize TuyaHttpStatusError.

        Args:
            message: Error message.
            status: HTTP status code returned by the API.
        """
        super().__init__(message)
        self.status = status


class EncodingError(TuyaLightsError):
    """Exception raised when a response body cannot be decoded from its charset."""


class DeserializingError(TuyaLightsError):
    """Exception raised when a response is not valid JSON or has an unexpected shape."""


class ApiError(TuyaLightsError):
    """Exception raised when the API reports a failure in a well-formed response.

    Attributes:
        code: Optional response code reported by the API.
    """

    def __init__(self, message: str = "", code: str | None = None) -> None:
        """Initialize ApiError.

        Args:
            message: Error message as reported by the API.
            code: Optional response code reported by the API.
        """
        super().__init__(message)
        self.code = code


class AuthenticationError(ApiError):
    """Exception raised when the login endpoint rejects the credentials.

    Attributes:
        response_status: The ``responseStatus`` field of the login response.
    """

    def __init__(self, message: str = "", response_status: str | None = None) -> None:
        """Initialize AuthenticationError.

        Args:
            message: The ``errorMsg`` field of the login response.
            response_status: The ``responseStatus`` field of the login response.
        """
        super().__init__(message, code=response_status)
        self.response_status = response_status


class DeviceError(ApiError):
    """Exception raised when a device command is not acknowledged.

    Attributes:
        device_id: Optional device ID associated with the error.
    """

    def __init__(self, message: str = "", code: str | None = None, device_id: str | None = None) -> None:
        """Initialize DeviceError.

        Args:
            message: Error message.
            code: Acknowledgement code reported by the API.
            device_id: Optional device ID associated with the error.
        """
        super().__init__(message, code=code)
        self.device_id = device_id


class InvalidParameterError(TuyaLightsError):
    """Exception raised for invalid parameter values.

    Attributes:
        parameter_name: Optional name of the invalid parameter.
        value: Optional value that was invalid.
    """

    def __init__(
        self,
        message: str = "",
        parameter_name: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize InvalidParameterError.

        Args:
            message: Error message.
            parameter_name: Optional name of the invalid parameter.
            value: Optional value that was invalid.
        """
        super().__init__(message)
        self.parameter_name = parameter_name
        self.value = value
