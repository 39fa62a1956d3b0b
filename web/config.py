class Config:
    HOST = '0.0.0.0'
    # Fixed; not read from the environment
    PORT = 8080
    # Relative to the web package
    TEMPLATE_FOLDER = 'templates'
    STATIC_FOLDER = 'static'
