# apps/core/utils.py

"""
Utilitários compartilhados pelas APIs JSON da Conexão UNK

- ErroRequisicao: erro de cliente convertido em {"error": ...}
- api_view: decorador que padroniza métodos, CSRF e tratamento de erros
- Funções de leitura/validação de parâmetros e de serialização
"""

import json
import logging
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from functools import wraps
from typing import Any, Dict, Iterable, Optional

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.http import JsonResponse
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime, parse_time
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)

MENSAGEM_ERRO_INTERNO = 'Erro interno do servidor'


class ErroRequisicao(Exception):
    """Erro de cliente com status HTTP associado"""

    status = 400

    def __init__(self, mensagem: str, status: Optional[int] = None):
        super().__init__(mensagem)
        self.mensagem = mensagem
        if status is not None:
            self.status = status


def json_erro(mensagem: str, status: int = 400) -> JsonResponse:
    """Resposta de erro no formato esperado pelo cliente"""
    return JsonResponse({'error': mensagem}, status=status)


def json_resposta(dados: Any, status: int = 200) -> JsonResponse:
    """JsonResponse que aceita listas"""
    return JsonResponse(dados, status=status, safe=False)


def _desfazer_transacao():
    """Descarta escritas parciais quando a requisição termina em erro"""
    if transaction.get_connection().in_atomic_block:
        transaction.set_rollback(True)


def api_view(metodos: Iterable[str], mensagem_erro: str = MENSAGEM_ERRO_INTERNO):
    """
    Decorador para endpoints JSON

    - Restringe os métodos HTTP aceitos (405 nos demais)
    - Dispensa CSRF (cliente SPA sem token de sessão)
    - Converte ErroRequisicao em resposta {"error": ...}
    - Converte violação de unicidade em 409
    - Registra qualquer outra exceção e responde 500
    """
    metodos_permitidos = [m.upper() for m in metodos]

    def decorator(view_func):
        @csrf_exempt
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            if request.method not in metodos_permitidos:
                resposta = json_erro('Método não permitido', status=405)
                resposta['Allow'] = ', '.join(metodos_permitidos)
                return resposta

            try:
                return view_func(request, *args, **kwargs)
            except ErroRequisicao as e:
                _desfazer_transacao()
                return json_erro(e.mensagem, status=e.status)
            except IntegrityError:
                _desfazer_transacao()
                logger.warning(f"Conflito de integridade em {request.method} {request.path}")
                return json_erro('Registro em conflito com dados existentes', status=409)
            except Exception:
                _desfazer_transacao()
                logger.exception(f"{mensagem_erro}: {request.method} {request.path}")
                return json_erro(mensagem_erro, status=500)

        return wrapped_view

    return decorator


# =================== LEITURA DE PARÂMETROS ===================

def ler_json(request) -> Dict:
    """Lê o corpo JSON da requisição (objeto vazio se não houver corpo)"""
    if not request.body:
        return {}

    try:
        dados = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ErroRequisicao('JSON inválido')

    if not isinstance(dados, dict):
        raise ErroRequisicao('Corpo da requisição deve ser um objeto JSON')

    return dados


def parse_id(valor, campo: str = 'id', obrigatorio: bool = True) -> Optional[int]:
    """Converte identificadores vindos de query string ou JSON"""
    if valor in (None, ''):
        if obrigatorio:
            raise ErroRequisicao(f'{campo} é obrigatório')
        return None

    try:
        return int(valor)
    except (TypeError, ValueError):
        raise ErroRequisicao(f'{campo} inválido')


def parse_lista_ids(valor, campo: str = 'userIds') -> list:
    """Valida lista não vazia de ids"""
    if not isinstance(valor, list) or not valor:
        raise ErroRequisicao(f'{campo} deve ser uma lista não vazia')

    ids = []
    for item in valor:
        id_convertido = parse_id(item, campo)
        if id_convertido not in ids:
            ids.append(id_convertido)
    return ids


def parse_data_valor(valor, campo: str, obrigatorio: bool = False) -> Optional[date]:
    """Aceita 'YYYY-MM-DD' ou ISO datetime e retorna date"""
    if valor in (None, ''):
        if obrigatorio:
            raise ErroRequisicao(f'{campo} é obrigatório')
        return None

    if isinstance(valor, str):
        try:
            data = parse_date(valor[:10])
        except ValueError:
            data = None
        if data:
            return data

    raise ErroRequisicao(f'{campo} inválido')


def parse_hora(valor, campo: str = 'time') -> Optional[time]:
    """Aceita 'HH:MM' ou 'HH:MM:SS'"""
    if valor in (None, ''):
        return None

    try:
        hora = parse_time(str(valor))
    except ValueError:
        hora = None

    if hora is None:
        raise ErroRequisicao(f'{campo} inválido')
    return hora


def parse_data_hora(valor, campo: str) -> Optional[datetime]:
    """Converte ISO datetime (ou data simples) em datetime"""
    if valor in (None, ''):
        return None

    if isinstance(valor, str):
        try:
            data_hora = parse_datetime(valor.replace('Z', '+00:00'))
        except ValueError:
            data_hora = None

        if data_hora is None:
            try:
                data = parse_date(valor)
            except ValueError:
                data = None
            if data:
                data_hora = datetime(data.year, data.month, data.day)

        if data_hora is not None:
            if timezone.is_naive(data_hora):
                data_hora = timezone.make_aware(data_hora)
            return data_hora

    raise ErroRequisicao(f'{campo} inválido')


def parse_decimal(valor, campo: str, obrigatorio: bool = False, digitos_inteiros: int = 10) -> Optional[Decimal]:
    """
    Converte valores monetários

    Rejeita NaN, infinito e valores que não cabem na coluna
    (max_digits - decimal_places dígitos inteiros).
    """
    if valor in (None, ''):
        if obrigatorio:
            raise ErroRequisicao(f'{campo} é obrigatório')
        return None

    try:
        numero = Decimal(str(valor))
    except (InvalidOperation, ValueError):
        raise ErroRequisicao(f'{campo} inválido')

    if not numero.is_finite():
        raise ErroRequisicao(f'{campo} inválido')

    if abs(numero) >= Decimal(10) ** digitos_inteiros:
        raise ErroRequisicao(f'{campo} excede o valor máximo permitido')

    return numero


def parse_bool(valor) -> Optional[bool]:
    """Interpreta 'true'/'false' de query strings"""
    if valor is None:
        return None
    if isinstance(valor, bool):
        return valor
    return str(valor).lower() in ('true', '1', 'yes', 'sim')


def validar_escolha(valor, escolhas, campo: str):
    """Garante que o valor pertence às choices do model"""
    validos = [chave for chave, _ in escolhas]
    if valor not in validos:
        raise ErroRequisicao(f"{campo} deve ser um de: {', '.join(validos)}")
    return valor


def campos_obrigatorios(dados: Dict, *campos: str, mensagem: Optional[str] = None):
    """Verifica presença de campos no corpo JSON"""
    faltando = [campo for campo in campos if dados.get(campo) in (None, '')]
    if faltando:
        raise ErroRequisicao(mensagem or f"Campos obrigatórios: {', '.join(faltando)}")


def buscar_ou_404(queryset_ou_model, mensagem: str, **filtros):
    """get() que responde 404 com mensagem amigável"""
    manager = getattr(queryset_ou_model, 'objects', queryset_ou_model)
    try:
        return manager.get(**filtros)
    except manager.model.DoesNotExist:
        raise ErroRequisicao(mensagem, status=404)


def buscar_usuario(valor, campo: str = 'userId'):
    """Carrega o usuário indicado por um parâmetro obrigatório (400/404)"""
    usuario_id = parse_id(valor, campo)
    return buscar_ou_404(get_user_model(), 'Usuário não encontrado', id=usuario_id)


# =================== SERIALIZAÇÃO ===================

def iso(valor) -> Optional[str]:
    """Serializa date/datetime em ISO 8601"""
    if valor is None:
        return None
    return valor.isoformat()


def valor_monetario(valor) -> Optional[float]:
    """Decimal -> float para o cliente"""
    if valor is None:
        return None
    return float(valor)


def resumo_usuario(usuario) -> Optional[Dict]:
    """Subconjunto de campos do usuário embutido em outras respostas"""
    if usuario is None:
        return None
    return {
        'id': usuario.id,
        'name': usuario.nome_exibicao,
        'email': usuario.email,
        'role': usuario.tipo,
    }
