# apps/agenda/feriados.py

"""
Cliente de feriados nacionais (BrasilAPI)

Consulta assíncrona com aiohttp; o cache por ano fica na view.
"""

import asyncio
import logging
from typing import Dict, List

import aiohttp
from django.conf import settings

logger = logging.getLogger(__name__)

# Datas comemorativas mantidas mesmo quando a API não as marca como nacionais
PALAVRAS_FERIADOS_RELEVANTES = ('natal', 'páscoa', 'carnaval')
TIPOS_NACIONAIS = ('national', 'federal')


class ErroFeriados(Exception):
    """Falha ao consultar a API de feriados"""


def filtrar_feriados_nacionais(feriados: List[Dict]) -> List[Dict]:
    """Mantém feriados nacionais e as datas comemorativas relevantes"""
    selecionados = []
    for feriado in feriados:
        nome = (feriado.get('name') or '').lower()
        if feriado.get('type') in TIPOS_NACIONAIS or any(
            palavra in nome for palavra in PALAVRAS_FERIADOS_RELEVANTES
        ):
            selecionados.append({
                'date': feriado.get('date'),
                'name': feriado.get('name'),
                'type': feriado.get('type'),
            })
    return selecionados


async def buscar_feriados(ano: int) -> List[Dict]:
    """
    Busca os feriados de um ano na BrasilAPI

    Raises:
        ErroFeriados: resposta não-200 ou falha de rede
    """
    url = f"{settings.UNK_FERIADOS_API_URL}/{ano}"
    timeout = aiohttp.ClientTimeout(total=settings.UNK_FERIADOS_TIMEOUT_SEGUNDOS)

    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as response:
                if response.status != 200:
                    raise ErroFeriados(f"Erro ao buscar feriados: {response.status}")
                dados = await response.json()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise ErroFeriados(f"Falha de conexão com a API de feriados: {e}") from e

    logger.info(f"Feriados de {ano} obtidos da BrasilAPI ({len(dados)} registros)")
    return filtrar_feriados_nacionais(dados)
