"""Static pattern catalogs for Portuguese (pt-BR) customer messages.

Every keyword and phrase is stored in normalized form: lower-case,
without accents or punctuation.
"""

from dataclasses import dataclass

from switchboard.recognition.enums import BusinessDomain, IntentType


@dataclass(frozen=True)
class IntentPattern:
    keywords: tuple[str, ...]
    phrases: tuple[str, ...]
    weight: float = 1.0


INTENT_PATTERNS: dict[IntentType, tuple[IntentPattern, ...]] = {
    IntentType.BOOKING_REQUEST: (
        IntentPattern(
            keywords=("agendar", "marcar", "reservar", "consulta", "horario", "vaga"),
            phrases=("gostaria de agendar", "quero agendar", "quero marcar", "preciso de um horario"),
        ),
        IntentPattern(
            keywords=("quando", "disponivel", "livre", "posso"),
            phrases=("quando posso", "tem vaga", "esta disponivel"),
            weight=0.8,
        ),
    ),
    IntentType.BOOKING_CANCEL: (
        IntentPattern(
            keywords=("cancelar", "desmarcar", "nao posso", "impedir"),
            phrases=("quero cancelar", "preciso cancelar", "nao vou poder"),
        ),
    ),
    IntentType.BOOKING_RESCHEDULE: (
        IntentPattern(
            keywords=("remarcar", "mudar", "trocar", "alterar", "reagendar"),
            phrases=("quero remarcar", "posso mudar", "trocar horario"),
        ),
    ),
    IntentType.BOOKING_INQUIRY: (
        IntentPattern(
            keywords=("agendamento", "marcado", "reservado", "confirmado"),
            phrases=("meu agendamento", "esta marcado", "foi confirmado"),
        ),
    ),
    IntentType.SERVICE_INQUIRY: (
        IntentPattern(
            keywords=("servico", "servicos", "oferecer", "fazer", "tipos", "trabalho"),
            phrases=("que servicos", "fazem o que", "tipos de"),
        ),
    ),
    IntentType.AVAILABILITY_CHECK: (
        IntentPattern(
            keywords=("disponivel", "livre", "vago", "horario", "quando"),
            phrases=("tem horario", "esta livre", "quando disponivel"),
        ),
    ),
    IntentType.PRICE_INQUIRY: (
        IntentPattern(
            keywords=("preco", "valor", "custo", "quanto", "custa", "orcamento"),
            phrases=("quanto custa", "qual o preco", "valor do"),
        ),
    ),
    IntentType.BUSINESS_HOURS: (
        IntentPattern(
            keywords=("horario", "funcionamento", "aberto", "fechado", "quando"),
            phrases=("horario de funcionamento", "que horas", "esta aberto"),
        ),
    ),
    IntentType.LOCATION_INQUIRY: (
        IntentPattern(
            keywords=("onde", "endereco", "localizacao", "fica", "local"),
            phrases=("onde fica", "qual endereco", "como chegar"),
        ),
    ),
    IntentType.GENERAL_GREETING: (
        IntentPattern(
            keywords=("oi", "ola", "bom dia", "boa tarde", "boa noite", "hey"),
            phrases=("oi tudo bem", "ola como vai", "bom dia"),
        ),
    ),
    IntentType.COMPLAINT: (
        IntentPattern(
            keywords=("reclamacao", "problema", "ruim", "pessimo", "insatisfeito", "reclamar"),
            phrases=("estou insatisfeito", "foi pessimo", "quero reclamar"),
        ),
    ),
    IntentType.COMPLIMENT: (
        IntentPattern(
            keywords=("otimo", "excelente", "parabens", "obrigado", "adorei", "perfeito"),
            phrases=("foi otimo", "adorei o servico", "muito obrigado"),
        ),
    ),
    IntentType.ESCALATION_REQUEST: (
        IntentPattern(
            keywords=("gerente", "responsavel", "supervisor", "falar com", "atendente"),
            phrases=("quero falar com", "cade o gerente", "falar com um atendente"),
        ),
    ),
    IntentType.EMERGENCY: (
        IntentPattern(
            keywords=("urgente", "emergencia", "socorro", "ajuda", "grave", "critico"),
            phrases=("e urgente", "preciso de ajuda", "emergencia"),
        ),
    ),
    IntentType.OTHER: (IntentPattern(keywords=(), phrases=(), weight=0.1),),
}

# (previous intent, candidate intent) -> bonus for natural conversation flow
INTENT_FLOW_BONUS: dict[tuple[IntentType, IntentType], float] = {
    (IntentType.GENERAL_GREETING, IntentType.SERVICE_INQUIRY): 0.2,
    (IntentType.SERVICE_INQUIRY, IntentType.PRICE_INQUIRY): 0.3,
    (IntentType.PRICE_INQUIRY, IntentType.BOOKING_REQUEST): 0.4,
    (IntentType.AVAILABILITY_CHECK, IntentType.BOOKING_REQUEST): 0.5,
    (IntentType.BOOKING_REQUEST, IntentType.BOOKING_INQUIRY): 0.3,
}

FIRST_TURN_GREETING_BONUS = 0.3

DOMAIN_AFFINITY_BONUS: dict[BusinessDomain, dict[IntentType, float]] = {
    BusinessDomain.HEALTHCARE: {
        IntentType.BOOKING_REQUEST: 0.2,
        IntentType.EMERGENCY: 0.3,
        IntentType.ESCALATION_REQUEST: 0.1,
    },
    BusinessDomain.BEAUTY: {
        IntentType.BOOKING_REQUEST: 0.2,
        IntentType.SERVICE_INQUIRY: 0.1,
        IntentType.PRICE_INQUIRY: 0.1,
    },
    BusinessDomain.LEGAL: {
        IntentType.BOOKING_REQUEST: 0.1,
        IntentType.EMERGENCY: 0.2,
        IntentType.ESCALATION_REQUEST: 0.2,
    },
    BusinessDomain.EDUCATION: {
        IntentType.BOOKING_REQUEST: 0.2,
        IntentType.SERVICE_INQUIRY: 0.1,
    },
    BusinessDomain.SPORTS: {
        IntentType.BOOKING_REQUEST: 0.2,
        IntentType.SERVICE_INQUIRY: 0.1,
    },
    BusinessDomain.CONSULTING: {
        IntentType.BOOKING_REQUEST: 0.1,
        IntentType.SERVICE_INQUIRY: 0.2,
        IntentType.PRICE_INQUIRY: 0.2,
    },
}

# Scanned in declaration order; the first domain with a hit wins
DOMAIN_KEYWORDS: dict[BusinessDomain, tuple[str, ...]] = {
    BusinessDomain.HEALTHCARE: (
        "psicologo", "terapia", "consulta", "sessao", "depressao", "ansiedade",
        "psiquiatra", "medicamento", "tratamento", "saude mental",
    ),
    BusinessDomain.BEAUTY: (
        "cabelo", "corte", "coloracao", "manicure", "pedicure", "unha",
        "maquiagem", "sobrancelha", "salao", "beleza", "estetica",
    ),
    BusinessDomain.LEGAL: (
        "advogado", "processo", "juridico", "contrato", "consulta legal",
        "direito", "lei", "tribunal", "acao", "defesa",
    ),
    BusinessDomain.EDUCATION: (
        "aula", "professor", "ensino", "aprender", "estudar", "reforco",
        "tutoring", "materia", "disciplina", "curso", "educacao",
    ),
    BusinessDomain.SPORTS: (
        "treino", "academia", "exercicio", "personal", "fitness", "musculacao",
        "cardio", "pilates", "yoga", "esporte", "condicionamento",
    ),
    BusinessDomain.CONSULTING: (
        "consultoria", "negocio", "empresa", "estrategia", "planejamento",
        "gestao", "financeiro", "marketing", "vendas", "operacoes",
    ),
}

POSITIVE_WORDS = ("bom", "otimo", "excelente", "obrigado", "adorei", "perfeito")
NEGATIVE_WORDS = ("ruim", "pessimo", "problema", "reclamacao", "insatisfeito")
