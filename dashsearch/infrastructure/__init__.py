"""Infrastructure layer: SQLAlchemy persistence implementing the application ports."""
