# apps/financas/models.py

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q

from apps.core.utils import iso, resumo_usuario, valor_monetario


class TransacaoQuerySet(models.QuerySet):

    def do_usuario(self, usuario):
        """Transações criadas pelo usuário ou atribuídas a ele"""
        return self.filter(Q(usuario=usuario) | Q(atribuida_a=usuario))


class Transacao(models.Model):
    """
    Receita ou despesa

    Um administrador pode atribuir uma receita a um DJ (atribuida_a);
    a receita passa a contar no saldo do DJ, não no do administrador.
    """

    TIPO_RECEITA = 'income'
    TIPO_DESPESA = 'expense'

    TIPO_CHOICES = [
        (TIPO_RECEITA, 'Receita'),
        (TIPO_DESPESA, 'Despesa'),
    ]

    tipo = models.CharField(max_length=10, choices=TIPO_CHOICES)
    valor = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    descricao = models.CharField(max_length=300)
    categoria = models.CharField(max_length=100, blank=True)
    data = models.DateField()
    comprovante_url = models.CharField(max_length=500, blank=True)

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='transacoes'
    )
    atribuida_a = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transacoes_atribuidas'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    objects = TransacaoQuerySet.as_manager()

    class Meta:
        db_table = 'transacao'
        ordering = ['-criado_em', '-id']
        indexes = [
            models.Index(fields=['usuario', 'tipo'], name='transacao_usuario_tipo_idx'),
            models.Index(fields=['atribuida_a'], name='transacao_atribuida_idx'),
        ]

    def __str__(self):
        return f"{self.get_tipo_display()}: {self.descricao} - R$ {self.valor}"

    def para_dict(self):
        return {
            'id': self.id,
            'type': self.tipo,
            'amount': valor_monetario(self.valor),
            'description': self.descricao,
            'category': self.categoria,
            'date': iso(self.data),
            'receiptUrl': self.comprovante_url or None,
            'userId': self.usuario_id,
            'assignedTo': self.atribuida_a_id,
            'user': resumo_usuario(self.usuario),
            'assignedUser': resumo_usuario(self.atribuida_a),
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }


class DespesaFixa(models.Model):
    """Despesa recorrente mensal (aluguel, assinaturas...)"""

    descricao = models.CharField(max_length=300)
    valor = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    categoria = models.CharField(max_length=100, blank=True)
    dia_vencimento = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1), MaxValueValidator(31)]
    )
    ativa = models.BooleanField(default=True)

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='despesas_fixas'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'despesa_fixa'
        ordering = ['dia_vencimento', 'descricao']

    def __str__(self):
        return f"{self.descricao} (dia {self.dia_vencimento})"

    def para_dict(self):
        return {
            'id': self.id,
            'description': self.descricao,
            'amount': valor_monetario(self.valor),
            'category': self.categoria,
            'dueDay': self.dia_vencimento,
            'isActive': self.ativa,
            'userId': self.usuario_id,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }


class Divida(models.Model):
    """Dívida em aberto com saldo restante"""

    descricao = models.CharField(max_length=300)
    credor = models.CharField(max_length=200, blank=True)
    valor_total = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    valor_restante = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    parcela_mensal = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    taxa_juros = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    data_vencimento = models.DateField(null=True, blank=True)

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='dividas'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'divida'
        ordering = ['data_vencimento', 'descricao']

    def __str__(self):
        return f"{self.descricao} - restante R$ {self.valor_restante}"

    @property
    def percentual_pago(self):
        if not self.valor_total:
            return 0
        return round(float((self.valor_total - self.valor_restante) / self.valor_total * 100), 1)

    def para_dict(self):
        return {
            'id': self.id,
            'description': self.descricao,
            'creditor': self.credor,
            'totalAmount': valor_monetario(self.valor_total),
            'remainingAmount': valor_monetario(self.valor_restante),
            'monthlyPayment': valor_monetario(self.parcela_mensal),
            'interestRate': valor_monetario(self.taxa_juros),
            'dueDate': iso(self.data_vencimento),
            'paidPercentage': self.percentual_pago,
            'userId': self.usuario_id,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }
