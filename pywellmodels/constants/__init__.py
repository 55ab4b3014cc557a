"""
Unit conversions and correlation reference constants.
"""

from .constants import (PA_PER_PSI, PSI_PER_PA, NM_PER_DYNECM, degF2R, degk_to_degf, oil_api,
                        SHI_K_LOW, SHI_GL_A, SHI_GL_B, SHI_GL_FV, SHI_GL_A1, SHI_GL_A2,
                        SHI_OW_A, SHI_OW_B1, SHI_OW_B2, GO_T_LO, GO_T_HI, GW_T_LO, GW_T_HI)
