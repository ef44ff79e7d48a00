"""
Portfolio Routes - Project detail views
Resolves the ``id`` route parameter to a catalog project
"""

from flask import render_template, request, current_app
from extensions import catalog
from . import portfolio_bp


DETAIL_TEMPLATE = 'pages/project_detail.html'
NOT_FOUND_TEMPLATE = 'pages/project_not_found.html'


def resolve_project_view(params):
    """
    Pick the template and context for a project route

    Args:
        params (Mapping): Route parameters; a missing or empty ``id`` is
            treated as ''

    Returns:
        tuple: (template name, template context). Unknown ids resolve to the
        project-not-found view rather than raising.
    """
    project_id = (params or {}).get('id') or ''
    if not isinstance(project_id, str):
        project_id = str(project_id)

    project = catalog.get_project_by_id(project_id)
    if project is None:
        current_app.logger.info(f"Project not found: {project_id!r}")
        return NOT_FOUND_TEMPLATE, {'project_id': project_id}

    return DETAIL_TEMPLATE, {'project': project}


@portfolio_bp.route('/project/', defaults={'id': ''}, strict_slashes=False)
@portfolio_bp.route('/project/<id>')
def project_detail(id):
    """Project detail page, or the project-not-found page"""
    template, context = resolve_project_view(request.view_args)
    return render_template(template, **context)
