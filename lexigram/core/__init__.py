# lexigram\core\__init__.py
"""
Core Domain Layer.

This package contains the pure business logic and entities of the system.
It follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on frameworks or the command line.
- No dependencies on infrastructure (file formats, filesystem).
- Defines Interfaces (Ports) that the Adapters must implement.
"""
