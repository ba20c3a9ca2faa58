# apps/core/middleware.py

import logging
import time

logger = logging.getLogger(__name__)


class RegistroRequisicoesMiddleware:
    """
    Middleware que registra cada requisição da API

    Grava método, caminho, status e duração em milissegundos.
    Respostas 5xx são registradas como erro.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        inicio = time.monotonic()

        response = self.get_response(request)

        duracao_ms = (time.monotonic() - inicio) * 1000
        mensagem = f"{request.method} {request.path} -> {response.status_code} ({duracao_ms:.1f}ms)"

        if response.status_code >= 500:
            logger.error(mensagem)
        elif response.status_code >= 400:
            logger.warning(mensagem)
        else:
            logger.info(mensagem)

        # Cabeçalho útil para depuração no cliente
        response['X-Tempo-Resposta'] = f"{duracao_ms:.1f}ms"

        return response
