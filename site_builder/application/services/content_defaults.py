"""Built-in content every business starts with before its first edit."""

from site_builder.domain.entities import (
    About,
    BusinessType,
    Contact,
    ContentRecord,
    Footer,
    Hero,
    Logo,
    ServiceCatalogEntry,
    ServiceCategory,
    ServiceIcon,
    ServiceItem,
    Services,
    ThemeColors,
)

# Color picker presets, three per row: barbershop, automotive, others.
PRESET_COLORS: tuple[str, ...] = (
    "#8B4513", "#D2691E", "#FFD700",
    "#1E40AF", "#3B82F6", "#10B981",
    "#DC2626", "#7C3AED", "#059669",
    "#EA580C", "#DB2777", "#0891B2",
)

BARBERSHOP_CONTENT = ContentRecord(
    logo=Logo(image="/images/logobarbearia.png", alt="MV Barbearia"),
    hero=Hero(
        title="MV Barbearia",
        subtitle="Seu visual, nossa missão",
        cta_text="Agende seu horário",
        background_image="/images/bannerbarbearia.png",
    ),
    about=About(
        title="Sobre Nós",
        description=(
            "Somos uma barbearia moderna que combina técnicas tradicionais "
            "com as últimas tendências em cortes masculinos."
        ),
        image="/images/sobrebarbearia.png",
    ),
    services=Services(
        title="Nossos Serviços",
        items=(
            ServiceItem(
                name="Corte Degradê",
                description="Corte moderno com técnica de degradê",
                price="R$ 35,00",
                icon=ServiceIcon.SCISSORS,
            ),
            ServiceItem(
                name="Barba Tradicional",
                description="Barba feita com navalha e produtos especiais",
                price="R$ 25,00",
                icon=ServiceIcon.RAZOR,
            ),
            ServiceItem(
                name="Combo Corte + Barba",
                description="Corte de cabelo + barba tradicional",
                price="R$ 55,00",
                icon=ServiceIcon.CROWN,
            ),
            ServiceItem(
                name="Hidratação Capilar",
                description="Tratamento completo para cabelos",
                price="R$ 40,00",
                icon=ServiceIcon.SPARKLES,
            ),
        ),
    ),
    contact=Contact(
        title="Contato",
        address="Rua Lauro Linhares 1060, Trindade",
        phone="(48) 99140-1012",
        email="mvcontato@gmail.com",
        hours="Segunda - Sexta 9h às 19h | Sáb: 8h às 14h",
    ),
    colors=ThemeColors(primary="#8B4513", secondary="#D2691E", accent="#FFD700"),
    footer=Footer(copyright="© 2025 MV Barbearia. Todos os direitos reservados."),
)

AUTOMOTIVE_CONTENT = ContentRecord(
    logo=Logo(image="/images/logoautomotivo.png", alt="MV Estética Automotiva"),
    hero=Hero(
        title="MV Estética Automotiva",
        subtitle="Cuidado completo para o seu veículo",
        cta_text="Agende uma lavagem",
        background_image="/images/bannerautomotivo.png",
    ),
    about=About(
        title="Sobre Nós",
        description=(
            "Lavagem, polimento e manutenção preventiva com produtos de "
            "qualidade e atenção a cada detalhe do seu carro."
        ),
        image="/images/sobreautomotivo.png",
    ),
    services=Services(
        title="Nossos Serviços",
        items=(
            ServiceItem(
                name="Lavagem Completa",
                description="Lavagem externa e interna com aspiração",
                price="R$ 60,00",
                icon=ServiceIcon.DROPLETS,
            ),
            ServiceItem(
                name="Enceramento",
                description="Cera de carnaúba com proteção da pintura",
                price="R$ 90,00",
                icon=ServiceIcon.SPARKLES,
            ),
            ServiceItem(
                name="Troca de Óleo",
                description="Troca de óleo e filtro com checagem geral",
                price="R$ 150,00",
                icon=ServiceIcon.WRENCH,
            ),
            ServiceItem(
                name="Higienização Interna",
                description="Limpeza profunda de bancos e carpetes",
                price="R$ 180,00",
                icon=ServiceIcon.CAR,
            ),
        ),
    ),
    contact=Contact(
        title="Contato",
        address="Rua Lauro Linhares 1060, Trindade",
        phone="(48) 99140-1012",
        email="mvautomotivo@gmail.com",
        hours="Segunda - Sexta 8h às 18h | Sáb: 8h às 12h",
    ),
    colors=ThemeColors(primary="#1E40AF", secondary="#3B82F6", accent="#10B981"),
    footer=Footer(copyright="© 2025 MV Estética Automotiva. Todos os direitos reservados."),
)

DEFAULT_CONTENT: dict[BusinessType, ContentRecord] = {
    BusinessType.BARBERSHOP: BARBERSHOP_CONTENT,
    BusinessType.AUTOMOTIVE: AUTOMOTIVE_CONTENT,
}

DEFAULT_CATALOG: tuple[ServiceCatalogEntry, ...] = (
    ServiceCatalogEntry(
        id="1",
        name="Corte Degradê",
        description="Corte moderno com técnica de degradê",
        price="R$ 35,00",
        category=ServiceCategory.CORTE,
    ),
    ServiceCatalogEntry(
        id="2",
        name="Barba Tradicional",
        description="Barba feita com navalha e produtos especiais",
        price="R$ 25,00",
        category=ServiceCategory.BARBA,
    ),
    ServiceCatalogEntry(
        id="3",
        name="Combo Corte + Barba",
        description="Corte de cabelo + barba tradicional",
        price="R$ 55,00",
        category=ServiceCategory.COMBO,
    ),
    ServiceCatalogEntry(
        id="4",
        name="Hidratação Capilar",
        description="Tratamento completo para cabelos",
        price="R$ 40,00",
        category=ServiceCategory.TRATAMENTO,
    ),
)
