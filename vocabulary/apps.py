from django.apps import AppConfig
from django.conf import settings


class VocabularyConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'vocabulary'

    def ready(self):
        from .catalog import WordCatalog, set_catalog
        set_catalog(WordCatalog.load(settings.WORDS_FILE))
