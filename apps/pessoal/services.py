# apps/pessoal/services.py

from datetime import date
from typing import Dict, Optional

from django.utils import timezone

from .models import RegistroAutocuidado


class AutocuidadoService:
    """Métricas de autocuidado exibidas no painel"""

    HUMOR_PADRAO = 'N/A'
    SONO_PADRAO = '0.0h'

    def metricas(self, usuario, dia: Optional[date] = None) -> Dict:
        """
        Métricas do dia (hoje por padrão)

        activeDays conta os dias distintos com algum registro;
        mood e sleep usam o primeiro registro do dia; gratitude
        conta os registros de gratidão do dia.
        """
        registros = RegistroAutocuidado.objects.filter(usuario=usuario)
        dia = dia or timezone.localdate()

        dias_ativos = registros.values('data').distinct().count()

        do_dia = list(registros.filter(data=dia).order_by('criado_em', 'id'))
        humor = next((r.valor for r in do_dia if r.tipo == RegistroAutocuidado.TIPO_HUMOR), None)
        sono = next((r.valor for r in do_dia if r.tipo == RegistroAutocuidado.TIPO_SONO), None)
        gratidao = sum(1 for r in do_dia if r.tipo == RegistroAutocuidado.TIPO_GRATIDAO)

        return {
            'userId': usuario.id,
            'date': dia.isoformat(),
            'activeDays': dias_ativos,
            'mood': humor or self.HUMOR_PADRAO,
            'sleep': sono or self.SONO_PADRAO,
            'gratitude': gratidao,
        }


# Instância global do serviço
autocuidado_service = AutocuidadoService()
