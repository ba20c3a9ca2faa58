# tests/test_financas.py

from decimal import Decimal

from apps.financas.models import Divida, Transacao
from apps.notificacoes.models import Notificacao

from .base import ApiTestCase


class TransacoesTests(ApiTestCase):

    def receita(self, criador, **extra):
        dados = {
            'type': 'income',
            'amount': 1500,
            'description': 'Cachê Club',
            'category': 'Cachê',
            'date': '2026-11-20',
            'userId': criador.id,
        }
        dados.update(extra)
        return self.post_json('/api/transactions', dados)

    def test_cria_transacao_propria(self):
        response = self.receita(self.dj)

        self.assertEqual(response.status_code, 201)
        dados = response.json()
        self.assertEqual(dados['amount'], 1500.0)
        self.assertIsNone(dados['assignedTo'])
        self.assertFalse(Notificacao.objects.exists())

    def test_campos_obrigatorios(self):
        response = self.post_json('/api/transactions', {'type': 'income', 'userId': self.dj.id})
        self.assertEqual(response.status_code, 400)

    def test_valor_negativo(self):
        self.assertEqual(self.receita(self.dj, amount=-10).status_code, 400)

    def test_valor_nao_numerico_ou_grande_demais(self):
        for valor in ('NaN', '-Infinity', '1e20', 'dez reais'):
            with self.subTest(amount=valor):
                self.assertEqual(self.receita(self.dj, amount=valor).status_code, 400)

        self.assertFalse(Transacao.objects.exists())

    def test_admin_atribui_receita_ao_dj(self):
        response = self.receita(self.admin, assignedTo=self.dj.id)

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['assignedTo'], self.dj.id)

        notificacao = Notificacao.objects.get(destinatario=self.dj)
        self.assertEqual(notificacao.tipo, Notificacao.Tipo.TRANSACAO_ATRIBUIDA)
        self.assertEqual(notificacao.recurso_id, response.json()['id'])

    def test_regras_de_atribuicao(self):
        casos = [
            ('dj não pode atribuir', self.dj, {'assignedTo': self.outro_dj.id}, 403),
            ('destino precisa ser dj', self.admin, {'assignedTo': self.admin.id}, 400),
            ('apenas receitas', self.admin, {'assignedTo': self.dj.id, 'type': 'expense'}, 400),
            ('destino inexistente', self.admin, {'assignedTo': 9999}, 404),
        ]

        for descricao, criador, extra, status in casos:
            with self.subTest(descricao):
                response = self.receita(criador, **extra)
                self.assertEqual(response.status_code, status)

        self.assertFalse(Transacao.objects.exists())
        self.assertFalse(Notificacao.objects.exists())

    def test_listagem_inclui_atribuidas(self):
        self.receita(self.admin, assignedTo=self.dj.id)
        self.receita(self.dj, description='Gig própria')
        self.receita(self.outro_dj, description='Outra pessoa')

        response = self.client.get('/api/transactions', {'userId': self.dj.id})

        descricoes = sorted(t['description'] for t in response.json())
        self.assertEqual(descricoes, ['Cachê Club', 'Gig própria'])

    def test_reatribuir_notifica_novo_dj(self):
        transacao_id = self.receita(self.admin, assignedTo=self.dj.id).json()['id']

        response = self.put_json(f'/api/transactions/{transacao_id}', {'assignedTo': self.outro_dj.id})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(Notificacao.objects.filter(destinatario=self.outro_dj).exists())

    def test_exclusao(self):
        transacao_id = self.receita(self.dj).json()['id']

        self.assertEqual(self.client.delete(f'/api/transactions/{transacao_id}').status_code, 200)
        self.assertEqual(self.client.get(f'/api/transactions/{transacao_id}').status_code, 404)


class DespesasFixasTests(ApiTestCase):

    def test_cria_e_filtra_ativas(self):
        response = self.post_json('/api/fixed-expenses', {
            'description': 'Aluguel do estúdio', 'amount': 900, 'dueDay': 5, 'userId': self.dj.id
        })
        self.assertEqual(response.status_code, 201)
        self.post_json('/api/fixed-expenses', {
            'name': 'Streaming', 'amount': 30, 'isActive': False, 'userId': self.dj.id
        })

        response = self.client.get('/api/fixed-expenses', {'userId': self.dj.id, 'isActive': 'true'})

        self.assertEqual([d['description'] for d in response.json()], ['Aluguel do estúdio'])

    def test_dia_de_vencimento_invalido(self):
        for dia in (0, 32):
            with self.subTest(dia=dia):
                response = self.post_json('/api/fixed-expenses', {
                    'description': 'Aluguel', 'amount': 900, 'dueDay': dia, 'userId': self.dj.id
                })
                self.assertEqual(response.status_code, 400)


class DividasTests(ApiTestCase):

    def test_restante_assume_valor_total(self):
        response = self.post_json('/api/debts', {
            'description': 'Controladora', 'totalAmount': 4800, 'userId': self.dj.id
        })

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['remainingAmount'], 4800.0)
        self.assertEqual(response.json()['paidPercentage'], 0.0)

    def test_restante_maior_que_total(self):
        response = self.post_json('/api/debts', {
            'description': 'Controladora', 'totalAmount': 100, 'remainingAmount': 200, 'userId': self.dj.id
        })

        self.assertEqual(response.status_code, 400)
        self.assertFalse(Divida.objects.exists())

    def test_taxa_de_juros_fora_da_coluna(self):
        response = self.post_json('/api/debts', {
            'description': 'Empréstimo', 'totalAmount': 1000, 'interestRate': 10000, 'userId': self.dj.id
        })

        self.assertEqual(response.status_code, 400)
        self.assertFalse(Divida.objects.exists())

    def test_pagamento_parcial(self):
        divida = Divida.objects.create(
            descricao='Caixa de som', valor_total=Decimal('1000'), valor_restante=Decimal('1000'), usuario=self.dj
        )

        response = self.put_json(f'/api/debts/{divida.id}', {'remainingAmount': 750})

        self.assertEqual(response.json()['remainingAmount'], 750.0)
        self.assertEqual(response.json()['paidPercentage'], 25.0)
