"""
Extensions Module - Centralized initialization of application-wide providers
Decouples the project catalog from the main app.py to avoid circular imports
and enable better testing.
"""

from flask import current_app

from utils.data import PROJECTS, ProjectCatalog


class Catalog:
    """
    Binds one ProjectCatalog to each Flask application.

    Usage mirrors other Flask extensions: create the object unbound, call
    ``init_app`` from the factory, then read through it inside an app context.
    """

    extension_name = 'catalog'

    def __init__(self, app=None, projects=None):
        if app is not None:
            self.init_app(app, projects=projects)

    def init_app(self, app, projects=None):
        store = ProjectCatalog(PROJECTS if projects is None else projects)
        app.extensions[self.extension_name] = store
        app.logger.info(f"✓ Project catalog loaded with {len(store)} projects")
        return store

    @property
    def store(self) -> ProjectCatalog:
        return current_app.extensions[self.extension_name]

    def list_projects(self):
        return self.store.list_projects()

    def get_project_by_id(self, project_id):
        return self.store.get_project_by_id(project_id)

    def is_found(self, project_id):
        return self.store.is_found(project_id)


# Initialize extensions without binding to app
catalog = Catalog()

__all__ = ['catalog', 'Catalog']
