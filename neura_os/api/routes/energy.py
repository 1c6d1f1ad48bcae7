from typing import Any, Dict, Optional

from fastapi import APIRouter

from neura_os.api.schemas import EnergyInput
from neura_os.core.energy import calculate_energy, energy_label

router = APIRouter(prefix="/api/energy", tags=["energy"])

@router.post("/calculate", response_model=Dict[str, Any])
async def calculate(payload: Optional[EnergyInput] = None):
    """
    Energy score and label from sleep, training, focus and nutrition.
    Missing or non-numeric fields count as 0.
    """
    payload = payload or EnergyInput()

    energy = calculate_energy(
        sleep=payload.sleep,
        training=payload.training,
        focus=payload.focus,
        nutrition=payload.nutrition
    )

    return {
        "energy": energy,
        "label": energy_label(energy)
    }
