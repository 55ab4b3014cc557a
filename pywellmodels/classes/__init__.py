from .classes import density_method, viscosity_method, kr_method, rs_method, fvf_method, ift_method, vd_method, c0_method, class_dic
