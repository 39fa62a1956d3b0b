import logging
import sys

from flask import Flask, Response, render_template, request
from jinja2 import TemplateError
from werkzeug.routing import Rule

from web.config import Config

logger = logging.getLogger(__name__)

CONTACT_REPLY = (
    'Thank you {name}! Your message has been received.\n'
    'Email: {email}\n'
    'Message: {message}'
)


def render_page(template, **data):
    try:
        return render_template(template, **data)
    except (TemplateError, OSError) as exc:
        return Response(str(exc) or type(exc).__name__, status=500, mimetype='text/plain')


def create_app(config=None):
    config = config or {}

    app = Flask(
        __name__,
        template_folder=config.get('TEMPLATE_FOLDER', Config.TEMPLATE_FOLDER),
        static_folder=config.get('STATIC_FOLDER', Config.STATIC_FOLDER),
        static_url_path='/static',
    )
    app.config.from_object(Config)
    app.config.update(config)

    def page(rule):
        # Plain werkzeug rule without a methods filter: every HTTP method matches
        def register(view):
            app.url_map.add(Rule(rule, endpoint=view.__name__))
            app.view_functions[view.__name__] = view
            return view
        return register

    @page('/')
    def home():
        data = {
            'title': 'Welcome to Go Website',
            'name': 'Go Developer',
        }
        return render_page('home.html', **data)

    @page('/about')
    def about():
        data = {
            'title': 'About Us',
            'content': 'This is a simple Go website for learning and practice.',
        }
        return render_page('about.html', **data)

    @page('/contact')
    def contact():
        if request.method == 'POST':
            # Echoed back verbatim, no validation or escaping
            body = CONTACT_REPLY.format(
                name=request.form.get('name', ''),
                email=request.form.get('email', ''),
                message=request.form.get('message', ''),
            )
            return Response(body, mimetype='text/plain')
        return render_page('contact.html')

    return app


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()
    port = app.config['PORT']
    logger.info('Server starting on http://localhost:%d', port)
    try:
        app.run(host=app.config['HOST'], port=port)
    except OSError as exc:
        logger.error('Server failed to start: %s', exc)
        sys.exit(1)


# Local run: python -m web.app
if __name__ == '__main__':
    main()
