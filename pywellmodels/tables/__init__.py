from .tables import pvt_table, relperm_table, drift_flux_table
