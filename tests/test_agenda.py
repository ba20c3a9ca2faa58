# tests/test_agenda.py

from datetime import date, time
from unittest.mock import AsyncMock, patch

from django.core.cache import cache

from apps.agenda.feriados import ErroFeriados, filtrar_feriados_nacionais
from apps.agenda.models import CompartilhamentoEvento, Evento, TransicaoInvalida
from apps.agenda.services import compartilhamento_service
from apps.notificacoes.models import Notificacao

from .base import ApiTestCase


class EventosTests(ApiTestCase):

    def test_cria_e_busca_evento(self):
        response = self.post_json('/api/events', {
            'title': 'Show no Club',
            'date': '2026-11-20',
            'time': '22:30',
            'location': 'Club UNK',
            'fee': '1500.50',
            'userId': self.dj.id,
        })

        self.assertEqual(response.status_code, 201)
        evento = response.json()
        self.assertEqual(evento['createdBy'], self.dj.id)
        self.assertEqual(evento['status'], 'scheduled')

        response = self.client.get(f"/api/events/{evento['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['time'], '22:30')
        self.assertEqual(response.json()['fee'], 1500.5)

        response = self.client.get('/api/events', {'userId': self.dj.id})
        self.assertEqual([e['title'] for e in response.json()], ['Show no Club'])

    def test_campos_obrigatorios(self):
        response = self.post_json('/api/events', {'title': 'Sem data', 'userId': self.dj.id})
        self.assertEqual(response.status_code, 400)

    def test_listagem_exige_user_id(self):
        self.assertEqual(self.client.get('/api/events').status_code, 400)

    def test_fee_invalido(self):
        for fee in ('NaN', 'Infinity', '1e20'):
            with self.subTest(fee=fee):
                response = self.post_json('/api/events', {
                    'title': 'Show', 'date': '2026-11-20', 'fee': fee, 'userId': self.dj.id
                })
                self.assertEqual(response.status_code, 400)

        self.assertFalse(Evento.objects.exists())

    def test_ordenacao_por_data_e_hora(self):
        Evento.objects.create(titulo='Tarde', data=date(2026, 12, 1), hora=time(18, 0), usuario=self.dj)
        Evento.objects.create(titulo='Sem hora', data=date(2026, 12, 1), usuario=self.dj)
        Evento.objects.create(titulo='Manhã', data=date(2026, 12, 1), hora=time(9, 0), usuario=self.dj)
        Evento.objects.create(titulo='Antes', data=date(2026, 11, 30), hora=time(23, 0), usuario=self.dj)

        response = self.client.get('/api/events', {'userId': self.dj.id})

        self.assertEqual(
            [e['title'] for e in response.json()],
            ['Antes', 'Manhã', 'Tarde', 'Sem hora']
        )

    def test_atualiza_e_exclui(self):
        evento = Evento.objects.create(titulo='Ensaio', data=date(2026, 11, 5), usuario=self.dj)

        response = self.put_json(f'/api/events/{evento.id}', {'status': 'confirmed'})
        self.assertEqual(response.json()['status'], 'confirmed')

        response = self.put_json(f'/api/events/{evento.id}', {'status': 'adiado'})
        self.assertEqual(response.status_code, 400)

        response = self.client.delete(f'/api/events/{evento.id}')
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Evento.objects.filter(id=evento.id).exists())


class CompartilhamentoEventoTests(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.evento = Evento.objects.create(
            titulo='Festival', data=date(2026, 12, 10), usuario=self.admin, criado_por=self.admin
        )

    def compartilhar(self, *usuarios):
        return self.post_json('/api/event-shares', {
            'eventId': self.evento.id,
            'userIds': [u.id for u in usuarios],
            'sharedBy': self.admin.id,
        })

    def test_compartilhar_cria_convites_pendentes_e_notificacoes(self):
        response = self.compartilhar(self.dj, self.outro_dj)

        self.assertEqual(response.status_code, 201)
        self.assertEqual([c['status'] for c in response.json()], ['pending', 'pending'])

        self.evento.refresh_from_db()
        self.assertTrue(self.evento.compartilhado)

        notificacao = Notificacao.objects.get(destinatario=self.dj)
        self.assertEqual(notificacao.tipo, Notificacao.Tipo.EVENTO_COMPARTILHADO)
        self.assertEqual(notificacao.evento_id, self.evento.id)
        self.assertEqual(notificacao.compartilhamento.usuario_id, self.dj.id)

    def test_evento_so_aparece_apos_aceite(self):
        self.compartilhar(self.dj)
        compartilhamento = CompartilhamentoEvento.objects.get(evento=self.evento, usuario=self.dj)

        response = self.client.get('/api/events', {'userId': self.dj.id})
        self.assertEqual(response.json(), [])

        self.put_json(f'/api/event-shares/{compartilhamento.id}', {'status': 'accepted'})

        response = self.client.get('/api/events', {'userId': self.dj.id})
        self.assertEqual([e['id'] for e in response.json()], [self.evento.id])

        response = self.client.get('/api/events', {'userId': self.outro_dj.id})
        self.assertEqual(response.json(), [])

    def test_convite_recusado_nao_aparece(self):
        self.compartilhar(self.dj)
        compartilhamento = CompartilhamentoEvento.objects.get(evento=self.evento, usuario=self.dj)
        self.put_json(f'/api/event-shares/{compartilhamento.id}', {'status': 'declined'})

        response = self.client.get('/api/events', {'userId': self.dj.id})
        self.assertEqual(response.json(), [])

    def test_recompartilhar_nao_reverte_aceite_nem_duplica(self):
        self.compartilhar(self.dj)
        compartilhamento = CompartilhamentoEvento.objects.get(evento=self.evento, usuario=self.dj)
        compartilhamento.alterar_status(CompartilhamentoEvento.STATUS_ACEITO)

        response = self.compartilhar(self.dj, self.outro_dj)

        self.assertEqual(response.status_code, 201)
        status = {c['userId']: c['status'] for c in response.json()}
        self.assertEqual(status, {self.dj.id: 'accepted', self.outro_dj.id: 'pending'})
        self.assertEqual(CompartilhamentoEvento.objects.filter(evento=self.evento).count(), 2)
        self.assertEqual(Notificacao.objects.filter(destinatario=self.dj).count(), 1)

    def test_transicoes_proibidas(self):
        self.compartilhar(self.dj)
        compartilhamento = CompartilhamentoEvento.objects.get(evento=self.evento, usuario=self.dj)
        url = f'/api/event-shares/{compartilhamento.id}'

        self.assertEqual(self.put_json(url, {'status': 'accepted'}).status_code, 200)
        self.assertEqual(self.put_json(url, {'status': 'declined'}).status_code, 409)
        self.assertEqual(self.put_json(url, {'status': 'pending'}).status_code, 409)
        self.assertEqual(self.put_json(url, {'status': 'talvez'}).status_code, 400)

        compartilhamento.refresh_from_db()
        self.assertEqual(compartilhamento.status, CompartilhamentoEvento.STATUS_ACEITO)

    def test_reenviar_status_atual_e_idempotente(self):
        self.compartilhar(self.dj)
        compartilhamento = CompartilhamentoEvento.objects.get(evento=self.evento, usuario=self.dj)

        self.assertTrue(compartilhamento.alterar_status('declined'))
        self.assertFalse(compartilhamento.alterar_status('declined'))
        with self.assertRaises(TransicaoInvalida):
            compartilhamento.alterar_status('accepted')

    def test_compartilhar_com_usuario_inexistente_desfaz_tudo(self):
        response = self.post_json('/api/event-shares', {
            'eventId': self.evento.id, 'userIds': [self.dj.id, 9999]
        })

        self.assertEqual(response.status_code, 404)
        self.assertFalse(CompartilhamentoEvento.objects.exists())
        self.assertFalse(Notificacao.objects.exists())

    def test_compartilhar_com_o_dono(self):
        response = self.compartilhar(self.admin)
        self.assertEqual(response.status_code, 400)

    def test_listagem_de_convites_filtrada(self):
        compartilhamento_service.compartilhar_evento(self.evento, [self.dj.id])

        response = self.client.get('/api/event-shares', {'userId': self.dj.id, 'status': 'pending'})
        self.assertEqual(len(response.json()), 1)
        self.assertEqual(response.json()[0]['event']['title'], 'Festival')

        response = self.client.get('/api/event-shares', {'userId': self.dj.id, 'status': 'accepted'})
        self.assertEqual(response.json(), [])

        self.assertEqual(self.client.get('/api/event-shares').status_code, 400)

    def test_excluir_convite(self):
        compartilhamento, = compartilhamento_service.compartilhar_evento(self.evento, [self.dj.id])

        response = self.client.delete(f'/api/event-shares/{compartilhamento.id}')

        self.assertEqual(response.json()['message'], 'Compartilhamento deletado com sucesso')
        self.assertFalse(CompartilhamentoEvento.objects.exists())


class FeriadosTests(ApiTestCase):

    FERIADOS = [
        {'date': '2026-12-25', 'name': 'Natal', 'type': 'national'},
    ]

    def test_busca_e_guarda_em_cache(self):
        with patch('apps.agenda.views.buscar_feriados', new=AsyncMock(return_value=self.FERIADOS)) as mock:
            response = self.client.get('/api/holidays', {'year': '2026'})
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json(), self.FERIADOS)

            self.client.get('/api/holidays', {'year': '2026'})

        mock.assert_awaited_once_with(2026)
        self.assertEqual(cache.get('feriados:2026'), self.FERIADOS)

    def test_falha_na_api_retorna_500(self):
        with patch('apps.agenda.views.buscar_feriados', new=AsyncMock(side_effect=ErroFeriados('timeout'))):
            response = self.client.get('/api/holidays', {'year': '2026'})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'error': 'Erro ao buscar feriados'})

    def test_ano_invalido(self):
        response = self.client.get('/api/holidays', {'year': '26'})
        self.assertEqual(response.status_code, 400)

    def test_filtra_feriados_nacionais(self):
        feriados = filtrar_feriados_nacionais([
            {'date': '2026-02-17', 'name': 'Carnaval', 'type': 'optional'},
            {'date': '2026-04-21', 'name': 'Tiradentes', 'type': 'national'},
            {'date': '2026-01-25', 'name': 'Aniversário de São Paulo', 'type': 'municipal'},
        ])

        self.assertEqual([f['name'] for f in feriados], ['Carnaval', 'Tiradentes'])
