# tests/test_relatorios.py

from datetime import date
from decimal import Decimal

from apps.financas.models import DespesaFixa, Divida, Transacao
from apps.relatorios.utils import nome_arquivo

from .base import ApiTestCase


class RelatorioFinanceiroTests(ApiTestCase):

    def setUp(self):
        super().setUp()
        hoje = date(2026, 10, 1)
        Transacao.objects.create(
            tipo='income', valor=Decimal('1000'), descricao='Gig própria', categoria='Cachê',
            data=hoje, usuario=self.dj
        )
        Transacao.objects.create(
            tipo='income', valor=Decimal('3000'), descricao='Festival', categoria='Cachê',
            data=hoje, usuario=self.admin, atribuida_a=self.dj
        )
        Transacao.objects.create(
            tipo='expense', valor=Decimal('200'), descricao='Uber', data=hoje, usuario=self.dj
        )
        DespesaFixa.objects.create(descricao='Streaming', valor=Decimal('50'), usuario=self.dj)
        DespesaFixa.objects.create(descricao='Antiga', valor=Decimal('999'), ativa=False, usuario=self.dj)
        Divida.objects.create(
            descricao='Controladora', valor_total=Decimal('1000'), valor_restante=Decimal('250'), usuario=self.dj
        )

    def test_totais_do_dj(self):
        response = self.client.get('/api/reports/finance', {'userId': self.dj.id})

        self.assertEqual(response.status_code, 200)
        dados = response.json()
        self.assertEqual(dados['income'], 4000.0)
        self.assertEqual(dados['expenses'], 200.0)
        self.assertEqual(dados['fixedExpenses'], 50.0)
        self.assertEqual(dados['debts'], 250.0)
        self.assertEqual(dados['balance'], 3500.0)
        self.assertEqual(dados['transactionCount'], 3)
        self.assertEqual(dados['byCategory'], [
            {'category': 'Cachê', 'income': 4000.0, 'expenses': 0.0},
            {'category': 'Sem categoria', 'income': 0.0, 'expenses': 200.0},
        ])

    def test_receita_atribuida_sai_do_saldo_do_admin(self):
        dados = self.client.get('/api/reports/finance', {'userId': self.admin.id}).json()

        self.assertEqual(dados['income'], 0.0)
        self.assertEqual(dados['balance'], 0.0)
        self.assertEqual(dados['byCategory'], [])

    def test_usuario_obrigatorio(self):
        self.assertEqual(self.client.get('/api/reports/finance').status_code, 400)
        self.assertEqual(self.client.get('/api/reports/finance/pdf', {'userId': 9999}).status_code, 404)

    def test_exportar_csv(self):
        response = self.client.get('/api/reports/finance/csv', {'userId': self.dj.id})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response['Content-Type'].startswith('text/csv'))
        self.assertEqual(
            response['Content-Disposition'],
            'attachment; filename="relatorio_financeiro_DJ_Alfa.csv"'
        )

        conteudo = response.content.decode('utf-8-sig')
        self.assertIn('Festival', conteudo)
        self.assertIn('-200.00', conteudo)
        self.assertIn('Saldo,3500.00', conteudo)

    def test_exportar_excel(self):
        response = self.client.get('/api/reports/finance/excel', {'userId': self.dj.id})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response['Content-Type'],
            'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        self.assertTrue(response.content.startswith(b'PK'))

    def test_exportar_pdf(self):
        response = self.client.get('/api/reports/finance/pdf', {'userId': self.dj.id})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertIn('relatorio_financeiro_DJ_Alfa.pdf', response['Content-Disposition'])
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_pdf_sem_transacoes(self):
        response = self.client.get('/api/reports/finance/pdf', {'userId': self.outro_dj.id})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.content.startswith(b'%PDF'))


class NomeArquivoTests(ApiTestCase):

    def test_aspas_no_nome_nao_quebram_o_cabecalho(self):
        self.dj.nome = 'DJ "Alfa"'
        self.dj.save()

        response = self.client.get('/api/reports/finance/csv', {'userId': self.dj.id})

        self.assertEqual(
            response['Content-Disposition'],
            'attachment; filename="relatorio_financeiro_DJ_Alfa.csv"'
        )

    def test_nome_sem_caracteres_validos_usa_o_id(self):
        self.dj.nome = '"""'

        self.assertEqual(nome_arquivo(self.dj, 'pdf'), f'relatorio_financeiro_{self.dj.id}.pdf')
