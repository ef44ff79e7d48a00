"""
Pages Routes - Public site pages
"""

from datetime import datetime
from flask import render_template, request, current_app
from extensions import catalog
from utils.data import PHOTOS
from . import pages_bp


@pages_bp.route('/')
def index():
    """Home page - hero, featured projects, photos"""
    return render_template('pages/home.html',
                           projects=catalog.list_projects(),
                           photos=PHOTOS)


@pages_bp.route('/about')
def about():
    """About page"""
    return render_template('pages/about.html')


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    lastmod = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [
        {'loc': f'{base_url}/', 'changefreq': 'weekly', 'priority': '1.0'},
        {'loc': f'{base_url}/about', 'changefreq': 'monthly', 'priority': '0.6'},
    ]
    for project in catalog.list_projects():
        sitemap_entries.append({
            'loc': f'{base_url}{project.detail_path}',
            'changefreq': 'monthly',
            'priority': '0.8',
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{entry["loc"]}</loc>')
        sitemap_xml.append(f'<lastmod>{lastmod}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Allow: /project/
Allow: /about
Disallow: /static/

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
