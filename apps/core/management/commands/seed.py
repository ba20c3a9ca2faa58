# apps/core/management/commands/seed.py

from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.agenda.models import Evento
from apps.agenda.services import compartilhamento_service
from apps.core.models import ConfiguracaoEmpresa, Usuario
from apps.financas.models import DespesaFixa, Divida, Transacao
from apps.financas.services import financeiro_service
from apps.pessoal.models import Nota, RegistroAutocuidado
from apps.projetos.models import Projeto, Tarefa

SENHA_DEMO = '123456'


class Command(BaseCommand):
    help = 'Popula o banco com usuários e dados de demonstração'

    def add_arguments(self, parser):
        parser.add_argument(
            '--sem-dados-demo',
            action='store_true',
            help='Cria apenas os usuários e as configurações da empresa'
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('🌱 Populando banco da Conexão UNK...')

        admin = self._criar_usuario('admin@email.com', 'Administrador UNK', Usuario.TIPO_ADMIN)
        dj = self._criar_usuario('dj@email.com', 'DJ UNK', Usuario.TIPO_DJ)

        if not ConfiguracaoEmpresa.objects.exists():
            ConfiguracaoEmpresa.objects.create(
                nome=settings.UNK_NOME_EMPRESA_PADRAO,
                descricao='Agência de gestão de artistas e DJs',
            )
            self.stdout.write('  ✅ Configurações da empresa criadas')

        if options['sem_dados_demo']:
            self.stdout.write(self.style.SUCCESS('✅ Usuários prontos (sem dados demo)'))
            return

        if Evento.objects.filter(usuario=dj).exists():
            self.stdout.write(self.style.WARNING('⚠️  Dados demo já existem, nada a fazer'))
            return

        self._criar_dados_demo(admin, dj)

        self.stdout.write(
            self.style.SUCCESS(
                '\n✅ Seed concluído!\n'
                f'🔑 Admin: admin@email.com / {SENHA_DEMO}\n'
                f'🔑 DJ:    dj@email.com / {SENHA_DEMO}\n'
            )
        )

    def _criar_usuario(self, email, nome, tipo):
        usuario = Usuario.objects.filter(email=email).first()
        if usuario:
            self.stdout.write(f'  ↪️  Usuário já existe: {email}')
            return usuario

        usuario = Usuario.objects.create_user(email=email, password=SENHA_DEMO, nome=nome, tipo=tipo)
        self.stdout.write(f'  ✅ Usuário criado: {email} ({tipo})')
        return usuario

    def _criar_dados_demo(self, admin, dj):
        hoje = timezone.localdate()

        # Agenda
        festival = Evento.objects.create(
            titulo='Festival de Verão',
            descricao='Set principal de encerramento',
            data=hoje + timedelta(days=7),
            local='Praia do Futuro, Fortaleza',
            valor_cache=Decimal('3500.00'),
            status='confirmed',
            usuario=admin,
            criado_por=admin,
        )
        Evento.objects.create(
            titulo='Residência no Club UNK',
            data=hoje + timedelta(days=3),
            local='Club UNK',
            valor_cache=Decimal('1200.00'),
            usuario=dj,
            criado_por=dj,
        )
        compartilhamento_service.compartilhar_evento(festival, [dj.id], compartilhado_por=admin)
        self.stdout.write('  ✅ Eventos criados (1 convite pendente para o DJ)')

        # Finanças
        cache_festival = Transacao.objects.create(
            tipo=Transacao.TIPO_RECEITA,
            valor=Decimal('3500.00'),
            descricao='Cachê Festival de Verão',
            categoria='Cachê',
            data=hoje,
            usuario=admin,
            atribuida_a=dj,
        )
        financeiro_service.notificar_atribuicao(cache_festival)
        Transacao.objects.create(
            tipo=Transacao.TIPO_DESPESA,
            valor=Decimal('250.00'),
            descricao='Transporte de equipamento',
            categoria='Logística',
            data=hoje,
            usuario=dj,
        )
        DespesaFixa.objects.create(descricao='Assinatura de músicas', valor=Decimal('59.90'),
                                   categoria='Software', dia_vencimento=10, usuario=dj)
        Divida.objects.create(descricao='Controladora nova', credor='Loja de Áudio',
                              valor_total=Decimal('4800.00'), valor_restante=Decimal('3200.00'),
                              parcela_mensal=Decimal('400.00'), usuario=dj)
        self.stdout.write('  ✅ Finanças criadas')

        # Projetos
        projeto = Projeto.objects.create(
            titulo='Lançamento do EP',
            descricao='Produção e divulgação do primeiro EP',
            categoria='dj-music',
            prazo=hoje + timedelta(days=60),
            progresso=25,
            usuario=dj,
        )
        Tarefa.objects.create(projeto=projeto, titulo='Finalizar mixagem', prioridade='high')
        Tarefa.objects.create(projeto=projeto, titulo='Criar capa', prioridade='medium')
        self.stdout.write('  ✅ Projeto criado')

        # Pessoal
        Nota.objects.create(titulo='Ideias de set', conteudo='Abrir com house melódico', tipo='idea',
                            fixada=True, usuario=dj)
        RegistroAutocuidado.objects.create(tipo=RegistroAutocuidado.TIPO_HUMOR, valor='8', data=hoje, usuario=dj)
        RegistroAutocuidado.objects.create(tipo=RegistroAutocuidado.TIPO_SONO, valor='7.5h', data=hoje, usuario=dj)
        self.stdout.write('  ✅ Notas e autocuidado criados')
