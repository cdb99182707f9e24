"""
Exception classes for mazeforge with helpful error messages and user guidance.

Every error raised by the library derives from :class:`MazeError`, which carries
the failing component, a suggested action, a stable error code and a small
dictionary of diagnostic data. The formatted message looks like::

    [OrthogonalMaze] Opening (9, 0) does not resolve to a cell
    Suggestion: Use coordinates inside the 5x5 grid
    Error Code: INVALID_OPENING
    Diagnostic Information:
       • opening: (9, 0)
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze errors with helpful context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "mazeforge"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   • {key}: {value}"

        super().__init__(full_message)


class InvalidParameterError(MazeError, ValueError):
    """Exception raised when a construction, braiding or generator parameter is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
        reason: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        suggested_action = _generate_parameter_suggestions(parameter_name, provided_value, expected_type, valid_range)

        message = f"Invalid value for parameter '{parameter_name}'"
        if reason:
            message += f": {reason}"

        self.parameter_name = parameter_name
        self.provided_value = provided_value

        super().__init__(
            message=message,
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_PARAMETER",
            diagnostic_data=diagnostic_data,
        )


class InvalidOpeningError(MazeError):
    """Exception raised when an opening cannot be added to a maze."""

    def __init__(
        self,
        opening: Any,
        reason: str,
        component: str | None = None,
        maze_size: str | None = None,
    ):
        diagnostic_data = {"opening": str(opening)}
        if maze_size:
            diagnostic_data["maze_size"] = maze_size

        if "already" in reason:
            suggested_action = "Remove the duplicate opening from the opening list"
        elif maze_size:
            suggested_action = f"Use coordinates inside the {maze_size} maze, or START/CENTER/END anchors"
        else:
            suggested_action = "Use coordinates that resolve to a cell of the maze"

        self.opening = opening

        super().__init__(
            message=f"Opening {opening} {reason}",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_OPENING",
            diagnostic_data=diagnostic_data,
        )


class UnsupportedTopologyError(MazeError):
    """Exception raised when a generator is run on a maze type it cannot handle."""

    def __init__(
        self,
        generator_name: str,
        maze_type: str,
        supported_types: list[str] | None = None,
    ):
        diagnostic_data: dict[str, Any] = {
            "generator": generator_name,
            "maze_type": maze_type,
        }

        if supported_types:
            diagnostic_data["supported_types"] = ", ".join(supported_types)
            suggested_action = f"Use one of the supported maze types ({', '.join(supported_types)})"
        else:
            suggested_action = "Choose another generation algorithm for this maze type"

        super().__init__(
            message=f"{generator_name} does not support {maze_type} mazes",
            component=generator_name,
            suggested_action=suggested_action,
            error_code="UNSUPPORTED_TOPOLOGY",
            diagnostic_data=diagnostic_data,
        )


class NotEnoughOpeningsError(MazeError):
    """Exception raised when solving a maze that has fewer than two openings."""

    def __init__(self, opening_count: int, component: str | None = None):
        super().__init__(
            message="Solving requires at least two openings",
            component=component,
            suggested_action="Add a start and an end opening with create_opening() before calling solve()",
            error_code="NOT_ENOUGH_OPENINGS",
            diagnostic_data={"opening_count": opening_count, "required": 2},
        )


class DisconnectedMazeError(MazeError):
    """Exception raised when a distance map cannot reach every cell of the maze."""

    def __init__(
        self,
        unreached_cells: int,
        total_cells: int,
        component: str | None = None,
    ):
        diagnostic_data = {
            "unreached_cells": unreached_cells,
            "total_cells": total_cells,
            "reached_fraction": f"{(total_cells - unreached_cells) / max(total_cells, 1):.1%}",
        }

        super().__init__(
            message="Distance map cannot be computed on a maze with unreachable cells",
            component=component,
            suggested_action="Generate the maze before computing a distance map",
            error_code="DISCONNECTED_MAZE",
            diagnostic_data=diagnostic_data,
        )


class MazeGenerationError(MazeError):
    """Exception raised when a generated maze fails perfect-maze verification."""

    def __init__(self, verification: dict[str, Any], component: str | None = None):
        failed = []
        if not verification.get("is_connected", True):
            failed.append("connectivity")
        if not verification.get("is_no_loops", True):
            failed.append("acyclicity")

        super().__init__(
            message=f"Generated maze is not perfect (failed: {', '.join(failed) or 'unknown'})",
            component=component,
            suggested_action="Disable braiding before verifying, or report the algorithm and seed",
            error_code="GENERATION_FAILED",
            diagnostic_data=verification,
        )


def _generate_parameter_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for parameter errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if "percent" in parameter_name.lower():
        suggestions.append("Percentages are fractions between 0 and 1")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


def validate_parameter_value(
    value: Any,
    parameter_name: str,
    expected_type: type | tuple[type, ...] | None = None,
    valid_range: tuple | None = None,
    component: str | None = None,
):
    """Validate parameter value and type."""
    if expected_type and not isinstance(value, expected_type):
        raise InvalidParameterError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=expected_type if isinstance(expected_type, type) else expected_type[0],
            component=component,
        )

    if valid_range and isinstance(value, (int, float)):
        if not (valid_range[0] <= value <= valid_range[1]):
            raise InvalidParameterError(
                parameter_name=parameter_name,
                provided_value=value,
                valid_range=valid_range,
                component=component,
            )
