"""
Embersome Site Backend
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the embersome package.
"""

import logging

from embersome import create_app

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    print('')
    print('  Embersome is running!')
    print(f'  -> Site:      http://localhost:{port}')
    print(f'  -> Dashboard: http://localhost:{port}/admin')
    print(f'  -> API:       http://localhost:{port}/api/admin/dashboard')
    print('')
    app.run(debug=False, host='0.0.0.0', port=port)
