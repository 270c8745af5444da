from app import create_app
from gevent.pywsgi import WSGIServer

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info(f"Server is running on port {port}")
    http_server = WSGIServer(('0.0.0.0', port), app)
    http_server.serve_forever()
