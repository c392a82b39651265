"""Conversion of control point values to tensors.

A spline value can be a scalar (t -> y) or a point with several scalar
components (t -> (x, y)). Internally every value becomes one row of a
tensor of shape ``(n_points, *value_shape)`` and each trailing component is
interpolated as an independent scalar problem.
"""

from __future__ import annotations

import numbers
from typing import Optional, Protocol, Sequence, Union, runtime_checkable

import torch
from torch import Tensor

from ._configuration_error import ConfigurationError


@runtime_checkable
class DataPoint(Protocol):
    """A value with a fixed number of scalar components.

    Any type providing this interface can be passed as a spline value; its
    components are read with ``point[i]`` for ``0 <= i < scalar_count``.

    Attributes
    ----------
    scalar_count : int
        Number of scalar components.

    Examples
    --------
    >>> class Vector:
    ...     scalar_count = 2
    ...
    ...     def __init__(self, dx, dy):
    ...         self.components = [dx, dy]
    ...
    ...     def __getitem__(self, index):
    ...         return self.components[index]
    ...
    ...     def __setitem__(self, index, value):
    ...         self.components[index] = value
    ...
    ...     def __add__(self, other):
    ...         return Vector(self[0] + other[0], self[1] + other[1])
    ...
    ...     def __rmul__(self, scalar):
    ...         return Vector(scalar * self[0], scalar * self[1])
    >>> isinstance(Vector(1.0, 2.0), DataPoint)
    True
    """

    scalar_count: int

    def __getitem__(self, index: int) -> float: ...

    def __setitem__(self, index: int, value: float) -> None: ...

    def __add__(self, other): ...

    def __rmul__(self, scalar: float): ...


Values = Union[Tensor, Sequence]


def _infer_dtype(points: list) -> torch.dtype:
    for point in points:
        if isinstance(point, Tensor) and point.is_floating_point():
            return point.dtype
    return torch.get_default_dtype()


def _point_to_tensor(
    point,
    dtype: torch.dtype,
    device: Optional[torch.device],
) -> Tensor:
    if isinstance(point, Tensor):
        return point.to(dtype=dtype, device=device)
    if isinstance(point, numbers.Real):
        return torch.tensor(float(point), dtype=dtype, device=device)

    if isinstance(point, DataPoint):
        components = [point[i] for i in range(point.scalar_count)]
    elif isinstance(point, Sequence) and not isinstance(point, str):
        components = list(point)
    else:
        raise ConfigurationError(
            f"Cannot interpret {type(point).__name__} as a data point"
        )

    if len(components) == 0:
        raise ConfigurationError("Data points need at least one component")

    return torch.stack(
        [
            torch.as_tensor(component, dtype=dtype, device=device)
            for component in components
        ]
    )


def as_values_tensor(
    values: Values,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Convert control point values to a tensor.

    Parameters
    ----------
    values : Tensor or sequence
        Either a tensor of shape (n_points, *value_shape), or a sequence of
        scalars, tensors, ``DataPoint`` objects or fixed-length sequences.
    dtype : torch.dtype, optional
        Floating dtype of the result. Defaults to the dtype of the input
        tensors, or ``torch.get_default_dtype()``.
    device : torch.device, optional
        Device of the result.

    Returns
    -------
    Tensor
        Values, shape (n_points, *value_shape).

    Raises
    ------
    ConfigurationError
        If the values are empty, not numeric, or points differ in shape.
    """
    if isinstance(values, Tensor):
        if values.dim() == 0:
            raise ConfigurationError(
                "values must be a sequence of points, got a scalar tensor"
            )
        if dtype is None:
            dtype = (
                values.dtype
                if values.is_floating_point()
                else torch.get_default_dtype()
            )
        return values.to(dtype=dtype, device=device)

    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ConfigurationError(
            f"values must be a tensor or a sequence, got {type(values).__name__}"
        )

    points = list(values)
    if len(points) == 0:
        raise ConfigurationError("values must contain at least one point")

    if dtype is None:
        dtype = _infer_dtype(points)

    tensors = [_point_to_tensor(point, dtype, device) for point in points]

    value_shape = tensors[0].shape
    for index, tensor in enumerate(tensors):
        if tensor.shape != value_shape:
            raise ConfigurationError(
                f"All points must have the same shape, point 0 has "
                f"{tuple(value_shape)} but point {index} has {tuple(tensor.shape)}"
            )

    return torch.stack(tensors)


def as_arguments_tensor(
    arguments: Optional[Union[Tensor, Sequence[float]]],
    n: int,
    dtype: torch.dtype,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Convert control point arguments to a 1-D tensor of length ``n``.

    When ``arguments`` is None the arguments are ``0, 1, ..., n - 1``.

    Raises
    ------
    ConfigurationError
        If the number of arguments is not ``n``.
    """
    if arguments is None:
        return torch.arange(n, dtype=dtype, device=device)

    arguments = torch.as_tensor(arguments, dtype=dtype, device=device)

    if arguments.dim() != 1 or arguments.shape[0] != n:
        raise ConfigurationError(
            f"Length of values and arguments don't match, "
            f"{n} != {arguments.numel()}"
        )

    return arguments


def as_query_tensor(t: Union[Tensor, float], like: Tensor) -> Tensor:
    """Convert query arguments to a tensor with the dtype and device of ``like``."""
    if isinstance(t, Tensor):
        return t.to(dtype=like.dtype, device=like.device)
    return torch.as_tensor(t, dtype=like.dtype, device=like.device)
