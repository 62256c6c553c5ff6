from django.apps import AppConfig

class SocialConfig(AppConfig):
    """Django app config for the follow graph, activity log and notifications."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'social'
