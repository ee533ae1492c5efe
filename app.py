"""
Development entry point.

    python app.py                 # Flask dev server on $PORT (default 5001)
    gunicorn app:app              # production
"""
import os

from fee_chat import create_app

app = create_app(os.getenv('FLASK_ENV'))


if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info('Server running on http://localhost:%s', port)
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
