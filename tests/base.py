# tests/base.py

from django.core.cache import cache
from django.test import TestCase

from apps.core.models import Usuario


class ApiTestCase(TestCase):
    """Usuários de teste e atalhos para chamadas JSON"""

    @classmethod
    def setUpTestData(cls):
        cls.admin = Usuario.objects.create_user(
            email='admin@email.com', password='123456', nome='Admin UNK', tipo=Usuario.TIPO_ADMIN
        )
        cls.dj = Usuario.objects.create_user(
            email='dj@email.com', password='123456', nome='DJ Alfa', tipo=Usuario.TIPO_DJ
        )
        cls.outro_dj = Usuario.objects.create_user(
            email='beta@email.com', password='123456', nome='DJ Beta', tipo=Usuario.TIPO_DJ
        )

    def setUp(self):
        cache.clear()

    def post_json(self, url, dados=None):
        return self.client.post(url, dados or {}, content_type='application/json')

    def put_json(self, url, dados=None):
        return self.client.put(url, dados or {}, content_type='application/json')
