# hazard_catalog.py
# Built-in hazard zones for the Amazon river network.
# Hosts normally load the catalog from the backend (see nav_storage.load_hazard_zones);
# this list is the offline fallback.

from typing import Tuple

from .models import Coord, HazardZone, HazardSeverity, HazardType


AMAZON_HAZARD_ZONES: Tuple[HazardZone, ...] = (
    HazardZone(
        zone_id="dz-encontro-aguas",
        label="Encontro das Águas",
        description="Turbulência onde Rio Negro e Rio Solimões se encontram. Atenção às correntes cruzadas.",
        center=Coord(-3.1656, -59.8961),
        radius_m=8000,
        severity=HazardSeverity.MEDIUM,
        hazard_type=HazardType.CURRENT,
    ),
    HazardZone(
        zone_id="dz-parintins-areia",
        label="Banco de Areia — Parintins",
        description="Banco de areia na entrada de Parintins em período de seca. Prefira o canal norte.",
        center=Coord(-2.62, -56.75),
        radius_m=4000,
        severity=HazardSeverity.MEDIUM,
        hazard_type=HazardType.SANDBANK,
    ),
    HazardZone(
        zone_id="dz-itacoatiara-raso",
        label="Área Rasa — Itacoatiara",
        description="Trecho raso próximo a Itacoatiara. Embarcações de grande calado devem evitar.",
        center=Coord(-3.14, -58.43),
        radius_m=3000,
        severity=HazardSeverity.LOW,
        hazard_type=HazardType.SHALLOW,
    ),
    HazardZone(
        zone_id="dz-coari-corrente",
        label="Correnteza Forte — Coari",
        description="Corrente forte na altura de Coari durante cheia. Reduza velocidade e mantenha o canal.",
        center=Coord(-4.09, -63.15),
        radius_m=5000,
        severity=HazardSeverity.HIGH,
        hazard_type=HazardType.CURRENT,
    ),
    HazardZone(
        zone_id="dz-tefe-lago",
        label="Entrada Lago de Tefé",
        description="Trecho raso na entrada do lago de Tefé. Navegue pelo canal sinalizado.",
        center=Coord(-3.36, -64.72),
        radius_m=3500,
        severity=HazardSeverity.MEDIUM,
        hazard_type=HazardType.SHALLOW,
    ),
    HazardZone(
        zone_id="dz-manaus-porto",
        label="Área Portuária — Manaus",
        description="Tráfego intenso de embarcações de grande porte. Reduza velocidade e sinalize.",
        center=Coord(-3.135, -60.013),
        radius_m=2500,
        severity=HazardSeverity.MEDIUM,
        hazard_type=HazardType.RESTRICTED,
    ),
    HazardZone(
        zone_id="dz-borba-raso",
        label="Canal Raso — Borba",
        description="Canal estreito e raso próximo a Borba em período de seca. Aguarde maré favorável.",
        center=Coord(-4.39, -59.59),
        radius_m=2000,
        severity=HazardSeverity.LOW,
        hazard_type=HazardType.SHALLOW,
    ),
    HazardZone(
        zone_id="dz-beruri-corrente",
        label="Correnteza — Beruri",
        description="Correnteza moderada no trecho próximo a Beruri. Navegue pelo canal central.",
        center=Coord(-3.878, -61.37),
        radius_m=3000,
        severity=HazardSeverity.LOW,
        hazard_type=HazardType.CURRENT,
    ),
)
