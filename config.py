import os


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SEND_FILE_MAX_AGE_DEFAULT = 3600

    # JSON Settings
    JSON_AS_ASCII = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Site Settings
    SITE_NAME = 'Portfolio'
    SITE_TITLE = 'Portfolio | Software Developer'
    SITE_DESCRIPTION = (
        'Personal portfolio: research, web applications, and photography.'
    )

    # Footer / social links, passed through to templates unmodified
    SOCIAL_LINKS = {
        'github': 'https://github.com/Rawleo',
        'linkedin': 'https://linkedin.com',
        'email': 'mailto:hello@example.com',
    }


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SEND_FILE_MAX_AGE_DEFAULT = 0


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
