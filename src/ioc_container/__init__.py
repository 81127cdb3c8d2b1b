"""Minimal dependency injection container.

Services are registered under string aliases together with a factory that
receives the container and returns the service. Resolution is lazy: a factory
runs the first time its alias is resolved. By default the result is cached
and shared by every later resolution; services registered as factories are
rebuilt on each resolution instead. Alongside services, the container holds
named parameters for configuration values that factories can read.

Basic Usage:
    >>> from ioc_container.container import Container
    >>>
    >>> container = Container()
    >>> container.add_parameter("dsn", "sqlite://")
    >>>
    >>> @container.provides()
    >>> def make_database(container) -> Database:
    ...     return Database(container.get_parameter("dsn"))
    >>>
    >>> db = container.make("database")

The package consists of several modules:
    - container: The Container facade used by applications
    - builders: Construct a container from plain mappings
    - registry: Service definition registration and lookup
    - instances: Singleton instance cache
    - parameters: Named parameter storage
    - domain: Core domain models (ServiceDefinition)
    - errors: Container-specific exceptions
"""
