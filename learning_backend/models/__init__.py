"""Importing any model module registers all three mapped classes.

``User`` and ``Course`` name ``Enrollment`` in string-based relationships, so
the mappers only configure once every class below has been imported.
"""

from learning_backend.models.course import Course
from learning_backend.models.enrollment import Enrollment
from learning_backend.models.user import User, UserRole

__all__ = ['Course', 'Enrollment', 'User', 'UserRole']
