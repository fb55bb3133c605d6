"""
liquid database module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the default coefficient sets of the pure liquids, keyed by identifier:
1. H2O: NSRDS correlations of water
2. 40 hydrocarbons from C7 to C16 (NA: n-alkanes, IA: iso-alkanes, CA: cycloalkanes,
   AR: aromatics), fitted with Aspen Plus data

a coefficient set is a dictionary of constants (W, Tc, Pc, Vc, Zc, Tt, Pt, Tb, omega) and of
correlation specifications (rho, pv, hl, Cp, sigma, mu, K, D), the same structure accepted by the
'<name>Coeffs' block of a mixture description. Zc, Pt and omega may be omitted, they are then
derived by LiquidProperties.

some hydrocarbons have no fit of their own for a property, their correlation is the mean of the
neighbouring species or the correlation of the n-alkane with the same carbon number.
"""

import copy
import functools
import numpy as np
from typing import Callable, Dict, List, Union
from ..core.exceptions import ConfigurationError
from .mapping_utils import LIQUID_SPECIES_NAMES, resolve_identifier

# define the array of relative molecular weights (unit: kg/kmol)
MOLECULAR_WEIGHTS = np.array([
    # NA series (0-9)
    100.21, 114.23, 128.26, 142.29, 156.31, 170.34, 184.37, 198.39, 212.42, 226.45,  # C7H16-C16H34

    # IA series (10-19)
    100.21, 114.23, 128.26, 142.29, 156.31, 170.34, 184.37, 198.39, 212.42, 226.45,  # C7H16-C16H34

    # CA series (20-29)
    98.189, 112.22, 126.24, 140.27, 154.29, 168.32, 182.35, 196.37, 210.40, 224.43,  # C7H14-C16H32

    # AR series (30-39)
    92.141, 106.17, 120.19, 134.22, 148.25, 162.28, 176.3, 190.33, 204.36, 218.38   # C7H8-C16H26
])

# critical temperature (unit: K), Aspen Plus
# AR9 725 in Aspen Plus change to 738
TC = np.array([
    540.0783, 568.7879, 594.148, 618.0478, 638.8139, 658.2474, 675.6722, 692.4759, 706.8825, 722.3919,  # NA series
    530.3689, 559.6267, 582.831, 601.6, 634, 651.1, 664, 681, 709.9, 714.9,  # IA series
    572.3138, 606.9, 630.8, 653.1, 674, 691, 707, 723, 731, 750,  # CA series
    591.89, 617.119, 638.2865, 660.4805, 675, 695, 708, 725, 738, 752  # AR series
])


# define the base density (unit: kmol/m³)
DENSITY_MOLE_BASE = np.array([
    2.334824, 2.033973, 1.824554, 1.613419, 1.470022, 1.336631, 1.168874, 1.149723, 1.0672, 0.9740954,  # NA series
    2.367927, 2.048463, 1.804949, 1.628512, 1.482161, 1.34559, 1.231408, 1.129689, 1.064955, 0.9904206,  # IA series
    2.718512, 2.246868, 2.050303, 1.785714, 1.629702, 1.475896, 1.310073, 1.219612, 1.12048, 1.064043,  # CA series
    3.155057, 2.684994, 2.268813, 2.009358, 1.672717, 1.612157, 1.472033, 1.339919, 1.212154, 1.13775  # AR series
])

# define the density calculation coefficient
DENSITY_MOLE_C1 = np.array([
    5.027197, 4.45061, 3.827231, 3.564553, 3.224435, 2.975835, 2.684114, 3.282248, 2.822846, 2.272655,  # NA series
    5.077431, 4.423531, 3.769051, 3.53043, 3.405022, 3.073679, 2.846699, 2.649641, 2.522129, 2.615479,  # IA series
    5.610533, 4.345458, 4.244367, 3.876668, 3.608319, 3.273914, 3.009745, 2.875664, 2.741187, 2.642593,  # CA series
    6.686536, 5.794586, 5.113811, 4.379605, 3.075382, 3.61023, 3.290278, 3.166587, 2.903437, 2.7663  # AR series
])

DENSITY_MOLE_C2 = np.array([
    1.523454, 1.472424, 1.78631, 1.361708, 1.406148, 1.290085, 1.908668, -0.8685738, -0.6657685, 0.9014,  # NA series
    0.9724182, 1.815531, 2.285869, 1.82782, 0.6026968, 1.023333, 1.187975, 1.300028, 0.7598754, -0.1582777,  # IA series
    1.530902, 3.999152, 1.83854, 1.873693, 0.9015797, 1.16564, 1.786576, 1.088355, 0.88976, 0.3213795,  # CA series
    1.960012, 1.735841, 1.396954, 1.577646, 6.271042, 1.454945, 1.431291, 0.7019814, 1.19842, 0.6390341  # AR series
])

DENSITY_MOLE_C3 = np.array([
    -0.6638865, -0.7348266, -1.241046, -0.5193682, -0.8540169, -0.7151879, -2.089041, 1.3621, 2.660555, -0.1956477,  # NA series
    0.659786, -1.975499, -2.136455, -1.851963, 0.8183977, -0.3641703, -1.106241, -1.584944, -0.1544191, 1.121582,  # IA series
    -0.6944685, -4.436177, -1.298671, -1.819692, 0.432799, -0.6629399, -2.367276, -0.8802128, -0.5123789, 0.2598667,  # CA series
    -0.7107034, -0.8681163, -0.4361963, -0.6188579, -9.730208, -1.441142, -1.462596, -0.03948075, -1.053466, -0.1995775  # AR series
])

DENSITY_MOLE_C4 = np.array([
    1.138402, 1.074232, 1.300843, 0.6812165, 0.9803732, 0.8404074, 1.777055, 0.1948367, -1.556255, 0.3854618,  # NA series
    0.09467573, 2.165808, 1.702389, 1.754721, -0.3502234, 0.5219873, 1.244804, 1.637858, 0.2620191, -0.2791799,  # IA series
    1.478402, 3.241813, 1.388136, 1.766646, -0.1330271, 0.9107811, 2.186752, 1.000326, 0.6378366, 0.3082864,  # CA series
    1.412205, 1.321052, 0.9533552, 0.8574952, 6.485045, 1.736824, 1.641341, 0.5384407, 1.099119, 0.6039803  # AR series
])

# define the heat of vaporization calculation coefficient
H_VAP_C1 = np.array([
    17.92212, 18.02051, 18.21311, 18.2038, 18.3103, 18.49945, 18.37194, 18.62886, 18.72621, 18.57697,  # NA series
    17.90736, 18.04, 18.12697, 18.40571, 18.32661, 17.98227, 18.05022, 18.18035, 18.55028, 18.97053,  # IA series
    17.90184, 17.91336, 18.01529, 18.11848, 18.23196, 18.39769, 18.62866, 18.45534, 18.78475, 18.6789,  # CA series
    17.94434, 18.00456, 18.1405, 18.2017, 18.36233, 18.3012, 18.34387, 18.42102, 19.09895, 18.92136   # AR series
])

H_VAP_C2 = np.array([
    1.110852, 1.029353, 1.462729, 0.9893556, 1.077554, 1.647936, 0.6302825, 1.605286, 1.6623, 0.7734324,  # NA series
    1.148012, 1.256631, 1.068637, 1.676271, 1.257359, -0.002938026, 0.1558533, 0.02177619, 1.348579, 1.526498,  # IA series
    1.350309, 0.9208944, 0.9489737, 0.9726639, 1.08092, 1.427058, 2.007071, 1.169989, 2.229706, 1.598352,  # CA series
    1.231299, 1.082252, 1.343098, 1.278537, 1.543233, 0.8721985, 0.9312297, 1.086461, 3.30351, 2.264817   # AR series
])

H_VAP_C3 = np.array([
    -1.12374, -0.905851, -1.663575, -0.7646847, -0.8475598, -1.877696, 0.05941812, -1.692431, -1.683477, -0.109564,  # NA series
    -1.108916, -1.279231, -0.9186814, -1.784176, -1.15443, 0.5468203, 0.08990575, 0.7210967, -1.288685, -0.1962959,  # IA series
    -1.621193, -0.8534523, -0.8898833, -0.8597394, -0.958457, -1.536548, -2.462099, -1.210721, -2.961733, -1.762002,  # CA series
    -1.35757, -1.102366, -1.496523, -1.398757, -1.783324, -0.4648225, -0.8641247, -1.106626, -4.368252, -2.498719   # AR series
])

H_VAP_C4 = np.array([
    0.4666989, 0.3240905, 0.6943608, 0.2381593, 0.2272311, 0.7478465, -0.2430794, 0.5945089, 0.5405077, -0.2142634,  # NA series
    0.4148294, 0.4936171, 0.3098454, 0.6151912,0.3734356, -0.1822122, 0.1236257, -0.3822444, 0.4289007, -0.8664502,  # IA series
    0.7483666, 0.3677554, 0.3910825, 0.3214944, 0.3209138, 0.5997108, 1.00084, 0.5270122, 1.321426, 0.6677492,  # CA series
    0.5918428, 0.4987298, 0.6247569, 0.5858075, 0.7414584, 0.02570438, 0.4084079, 0.4837281, 1.621929, 0.7575815   # AR series
])

# define the vapor pressure calculation coefficient
VAPOR_PRESSURE_C1 = np.array([
    -7.87961, -8.089952, -8.096452, -8.581278, -8.973956, -8.746015, -10.00299, -8.888841, -9.495756, -10.64425,  # NA series
    -7.628551, -8.031157, -8.485507, -8.964596, -9.11032, -9.716182, -9.704416, -11.00182, -9.289367, -13.73309,  # IA series
    -7.076046, -7.868779, -7.876356, -8.046513, -8.381979, -8.492304, -8.70999, -8.887769, -9.302744, -9.213571,  # CA series
    -7.489683, -7.540967, -7.930167, -8.177687, -7.9966, -9.346708, -8.181494, -8.784592, -9.532803, -9.640387   # AR series
])

VAPOR_PRESSURE_C2 = np.array([
    2.1631, 2.1530, 1.5620, 2.3945, 2.6894, 1.909, 5.0499, 1.6612, 2.6635, 5.0425,  # NA series
    1.7367, 2.1343, 2.5776, 2.7584, 3.4381, 4.3387, 3.3065, 6.1326, 2.8789, 11.8853,  # IA series
    1.413174, 2.700335, 2.53336, 2.535799, 2.63592, 2.27583, 2.298883, 2.479826, 2.827225, 2.355331,  # CA series
    2.0576, 1.7691, 2.2696, 2.3730, 1.3319, 4.1944, 1.3722, 1.8915, 0.3755, 2.4566   # AR series
])

VAPOR_PRESSURE_C3 = np.array([
    -3.2332, -3.4640, -3.0560, -4.1917, -4.5175, -4.2226, -8.1389, -4.8415, -6.0870, -8.5712,  # NA series
    -2.6282, -3.2129, -4.3531, -5.0321, -5.2909, -6.9332, -6.2131, -9.3388, -5.4972, -12.4992,  # IA series
    -1.873893, -3.229004, -3.705645, -4.122909, -4.168205, -3.969585, -4.275862, -5.206418, -5.557091, -5.275687,  # CA series
    -2.4878, -2.4539, -3.1220, -3.5135, -2.8188, -5.8042, -4.6191, -4.5207, -0.2573, -4.0749   # AR series
])

VAPOR_PRESSURE_C4 = np.array([
    -3.0459, -3.5162, -4.3584, -4.2356, -4.5587, -5.1820, -3.0943, -5.2795, -5.0630, -4.1172,  # NA series
    -3.5220, -3.5802, -3.4371, -3.9983, -3.9351, 0.0, 0.00, 0.0, -4.4136, -8.7584,  # IA series
    -3.190502, -2.640848, -2.461743, -2.522976, -3.125167, -4.123072, -4.422117, -3.233574, -4.479429, -4.546454,  # CA series
    -3.0796, -3.4321, -3.3032, -3.2149, -4.4511, -3.0310, -2.7783, -3.2508, -10.8871, -7.7811   # AR series
])

VAPOR_PRESSURE_C5 = np.array([
    14.8213, 14.7265, 14.6448, 14.5640, 14.5048, 14.4062, 14.3375, 14.2521, 14.1968, 14.1860,  # NA series
    14.8210, 14.7326, 14.6497, 14.5571, 14.5288, 14.4253, 14.3364, 14.2964, 14.1819, 14.1688,  # IA series
    15.06289, 14.99967, 14.86304, 14.75245, 14.68876, 14.58784, 14.50112, 14.42582, 14.26409, 14.25478,  # CA series
    15.2341, 15.0991, 14.9787, 14.8753, 14.7619, 14.6766, 14.5742, 14.4978, 14.4263, 14.3602   # AR series
])

# define the heat capacity calculation coefficient
CP_C1 = np.array([
    354909.9, 226117.1, 424454.8, 510915.2, 621716.8, 444932.2, 531311.1, 738234, 472478, 355214,  # NA series
    182676.5, 265066.5, 272898.4, 319960.5, 439922.5, 328307.8, 346017.7, 369094.2, 305880.6, 361362.8,  # IA series
    134897.8, 174921.4, 193521.8, 222006.1, 196648.8, 248885.1, 275459, 269437.7, 358124.2, 500921.5,  # CA series
    169723.4, 188594.1, 228341.6, 233522, 282734.8, 383932.6, 246801, 316938, 387527.9, 334469.4   # AR series
])

CP_C2 = np.array([
    -1879.994, -393.2255, -2003.306, -2463.571, -3342.821, -1349.803, -2038.465, -3274.194, -892.3188, 439.1416,  # NA series
    -282.0751, -925.7478, -652.1621, -790.0959, -1858.656, -522.7844, -433.524, -419.4126, 24.33608, -100.9787,  # IA series
    -178.3045, -449.4858, -443.4251, -498.0671, 18.33124, -299.2721, -523.3012, 37.77046, -296.337, -1593.589,  # CA series
    -531.5645, -618.2081, -854.6969, -581.7735, -703.4817, -1551.255, -213.7638, -412.219, -566.3627, -195.9925   # AR series
])

CP_C3 = np.array([
    6.673906, 2.03619, 6.809594, 7.95685, 10.72092, 4.741621, 7.003119, 9.715697, 3.634134, -0.06484127,  # NA series
    1.664878, 3.916059, 3.011432, 3.442441, 6.7641, 2.905832, 2.756195, 2.809151, 1.998308, 2.328918,  # IA series
    1.338131, 2.435969, 2.582482, 2.813193, 1.538456, 2.513471, 3.61304, 1.775316, 2.544146, 6.082063,  # CA series
    2.109447, 2.65454, 3.537953, 2.660975, 2.915648, 5.537016, 2.112912, 2.480698, 2.827972, 2.193985   # AR series
])

CP_C4 = np.array([
    -0.006573532, -0.00171662, -0.006191957, -0.007059364, -0.01018517, -0.003804846, -0.00635852, -0.007943202, -0.002668192, 0.000654267,  # NA series
    -0.001213512, -0.003752841, -0.002676023, -0.003025204, -0.006278606, -0.002464286, -0.002324392, -0.002349579, -0.001763382, -0.001998586,  # IA series
    -0.000869601, -0.002003518, -0.002289631, -0.002422068, -0.001373525, -0.00215317, -0.003359545, -0.001543182, -0.00212153, -0.004927483,  # CA series
    -0.001709682, -0.002488198, -0.003461254, -0.002194194, -0.002410929, -0.004801989, -0.001844438, -0.002021209, -0.002252546, -0.001810669   # AR series
])

CP_B = np.array([
    5102.037, 4717.985, 7643.461, 9116.998, 19435.48, 6898.735, 16280.4, 12942.46, 5968.094, 2006.808,  # NA series
    3659.773, 6671.442, 5839.452, 6387.456, 10816.3, 6398.147, 6656.283, 6884.936, 6473.766, 7040.727,  # IA series
    3406.21, 3951.728, 6211.5, 6215.289, 5650.167, 5969.544, 8102.74, 6348.958, 6799.07, 9856.776,  # CA series
    1892.555, 5930.565, 9816.051, 2323.261, 6289.098, 9430.189, 6437.93, 6708.888, 7296.286, 6983.237   # AR series
])

# define the thermal conductivity calculation coefficient
THERMAL_CONDUCTIVITY_C1 = np.array([
    0.2518034, 0.324779, 0.1320011, 0.2054523, 0.293176, 0.2617041, 0.2729825, 0.2315637, 0.3188399, 0.124925,  # NA series
    0.1952605, 0.2131949, 0.1830886, 0.1869343, 0.1875162, 0.1890324, 0.1951084, 0.1970643, 0.1938024, 0.2016398,  # IA series
    0.1263551, 0.2999934, 0.2080051, 0.1786259, 0.1780748, 0.1848997, 0.1955633, 0.1949876, 0.193132, 0.1968144,  # CA series
    0.2110555, 0.1849382, 0.1803469, 0.196229, 0.2053044, 0.2300362, 0.2002354, 0.2087614, 0.2119798, 0.2142812   # AR series
])

THERMAL_CONDUCTIVITY_C2 = np.array([
    -0.00058022, -0.001251982, 0.00042388, -0.000253337, -0.000927561, -0.000447201, -0.000742848, -0.000400985, -0.001110158, 0.000356985,  # NA series
    -0.000207548, -0.000397212, -0.000295845, -0.000293936, -0.000289016, -0.000279674, -0.000296627, -0.000296039, -0.000276737, -0.000295973,  # IA series
    0.000228751, -0.001335119, -0.000432363, -0.000239416, -0.000221934, -0.000251821, -0.000279849, -0.000266521, -0.000225004, -0.000268693,  # CA series
    -0.000230093, -8.41E-05, -8.59E-05, -0.000236193, -0.000431036, -0.000623614, -0.000231707, -0.000270114, -0.000241394, -0.000270697   # AR series
])

THERMAL_CONDUCTIVITY_C3 = np.array([
    4.62E-07, 2.57E-06, -2.07E-06, -5.26E-08, 1.71E-06, 1.59E-08, 1.21E-06, 3.84E-07, 2.27E-06, -1.26E-06,  # NA series
    -5.05E-07, 2.13E-07, 5.09E-07, 4.90E-07, 4.61E-07, 4.29E-07, 4.54E-07, 4.46E-07, 3.95E-07, 4.27E-07,  # IA series
    -1.39E-06, 3.14E-06, 3.94E-07, 3.53E-07, 3.03E-07, 3.66E-07, 4.13E-07, 3.71E-07, 2.73E-07, 3.68E-07,  # CA series
    -2.45E-07, -5.34E-07, -4.76E-07, 4.49E-08, 8.08E-07, 1.27E-06, 2.90E-07, 3.68E-07, 2.86E-07, 3.52E-07   # AR series
])

THERMAL_CONDUCTIVITY_C4 = np.array([
    5.73E-11, -2.11E-09, 2.03E-09, 1.94E-10, -1.33E-09, 3.38E-10, -8.41E-10, -2.20E-10, -1.78E-09, 9.24E-10,  # NA series
    8.19E-10, 0, -6.74E-10, -6.29E-10, -5.52E-10, -5.02E-10, -5.05E-10, -4.83E-10, -4.10E-10, -4.33E-10,  # IA series
    1.43E-09, -2.68E-09, -1.05E-10, -4.43E-10, -3.77E-10, -4.10E-10, -4.51E-10, -3.95E-10, -3.26E-10, -3.60E-10,  # CA series
    3.85E-10, 5.92E-10, 5.83E-10, 0, -7.13E-10, -1.04E-09, -3.51E-10, -3.95E-10, -3.45E-10, -3.61E-10   # AR series
])

# normal boiling temperature, used by the surface tension estimate
T_BOILING = np.array([
    371.533, 398.779, 423.796, 447.2649, 469.037, 489.435, 508.616, 526.689, 543.798, 560.07,  # NA series
    363.116, 390.7767, 416.11, 440.05, 462.348, 484.318, 503.515, 521.96, 541.45, 559,  # IA series
    374.0441, 404.916, 429.8516, 454.051, 476.657, 498.005, 518.039, 536.415, 553.45, 570.825,  # CA series
    383.73, 409.3192, 432.3578, 456.4243, 476.32, 498.73, 515.07, 536.12, 551.85, 571.026   # AR series
])

# viscosity calculation type
VISCOSITY_TYPE = np.array([
    1, 1, 1, 1, 1, 0, 0, 1, 1, 0,  # NA series
    0, 1, 0, 1, 1, 0, 0, 1, 1, 0,  # IA series
    1, 1, 1, 1, 1, 0, 1, 1, 1, 1,  # CA series
    0, 0, 1, 0, 1, 0, 1, 1, 1, 0   # AR series
])

# viscosity calculation coefficient
VISCOSITY_C1 = np.array([
    1.24E-05, 1.52E-05, 2.24E-05, 1.49E-05, 2.05E-05, -14.41467, -13.51084, 2.19E-05, 1.68E-05, -13.31999,  # NA series
    -16.31876, 1.18E-06, -15.77989, 1.73E-05, 1.71E-05, -15.96402, -15.70299, 1.64E-05, 1.38E-05, -14.34837,  # IA series
    1.88E-05, 7.61E-05, 3.95E-05, 3.28E-05, 5.08E-05, -12.00933, 7.51E-05, 3.64E-05, 5.62E-05, 4.25E-05,  # CA series
    -14.13487, -15.33478, 3.02E-05, -15.68655, 3.57E-05, -14.76103, 2.34E-05, 1.56E-05, 1.84E-05, -14.04636   # AR series
])

VISCOSITY_C2 = np.array([
    2.929096, 2.774066, 2.174561, 2.853798, 2.562408, 4754.647, 3972.807, 2.584701, 2.883181, 4095.199,  # NA series
    5565.086, 1.043895, 5436.034, 2.751356, 2.740532, 6488.879, 6319.413, 2.855019, 2.982286, 5124.207,  # IA series
    2.138409, 0.7803176, 1.803119, 1.964264, 1.565736, 2824.19, 1.232657, 2.028965, 1.497938, 1.86889,  # CA series
    3836.384, 5276.407, 2.032466, 5981.264, 2.05478, 5280.555, 2.550972, 2.936851, 2.620055, 4969.644   # AR series
])

VISCOSITY_C3 = np.array([
    0.04205816, 0.01229823, 0.366305, 0.00353968, 0.155587, -1221106, -971593.1, 0.2683876, 0.1551264, -1055248,  # NA series
    -1356671, 0.8655421, -1340191, 0.06056141, 0.1308882, -1869010, -1811549, 0.1848407, 0.0604602, -1396348,  # IA series
    0.2880612, 0.8311653, 0.365141, 0.3111631, 0.5509251, -675101.1, 0.746973, 0.346774, 0.5153761, 0.396486,  # CA series
    -831695.6, -1338930, 0.240996, -1621894, 0.04241543, -1412694, 0.1505853, 0.03653179, 0.6504159, -1365889   # AR series
])

VISCOSITY_C4 = np.array([
    578.56, 601.1452, 692.8336, 655.0959, 683.0293, 148501600, 125695800, 740.7109, 771.1342, 150242600,  # NA series
    132066500, 2685.477, 139328200, 643.3326, 680.2668, 227252700, 224220500, 745.8008, 791.788, 187627200,  # IA series
    795.6238, 716.0694, 691.2704, 753.3374, 730.3373, 103666900, 737.3131, 809.9692, 842.47, 857.0411,  # CA series
    83001950, 141182600, 688.1892, 183461500, 733.5471, 170812600, 753.942, 775.1901, 835.4153, 186949700   # AR series
])

VISCOSITY_C5 = np.array([
    114.8583, 145.4281, 73.18027, 171.2555, 140.0942, 268.1, 273.15, 130.6535, 152.5446, 293.138,  # NA series
    273.1, -402.7825, 283.15, 152.4645, 140.8033, 270, 270, 142.4098, 178.6861, 273.15,  # IA series
    71.39954, 22.04783, 98.19912, 105.8585, 86.96575, 270, 83.62071, 129.0699, 107.9376, 127.1157,  # CA series
    183.412, 233.1577, 114.9895, 278.097, 189.2849, 283.144, 150.2867, 184.9577, 31.38227, 273.15   # AR series
])

# lower limit of the density fit (unit: K), taken as the triple point temperature
DENSITY_T_MIN = np.array([
    182.6, 216.9, 219.6, 243.5, 247.6, 263.5, 267.7, 279.6, 283.0, 291.3,  # NA series
    154.9, 164.1, 192.8, 198.4, 224.3, 226.3, 247.1, 246.6, 264.4, 263.8,  # IA series
    146.7, 161.8, 178.2, 198.4, 210.0, 225.6, 232.2, 273.1, 220.0, 271.4,  # CA series
    178.1, 178.2, 171.6, 185.1, 194.7, 209.7, 220.0, 236.0, 220.0, 258.7   # AR series
])

# molar volume at the normal boiling point (unit: cm³/mol)
V_BP = np.array([
    161.82, 184.17, 206.64, 229.23, 251.92, 274.71, 297.58, 320.54, 343.57, 366.67,  # NA series
    161.38, 183.73, 206.20, 228.79, 251.48, 274.26, 297.13, 320.08, 343.11, 366.21,  # IA series
    150.99, 173.28, 195.70, 218.23, 240.88, 263.62, 286.45, 309.36, 332.36, 355.42,  # CA series
    122.99, 145.08, 167.33, 189.71, 212.22, 234.84, 257.55, 280.36, 303.25, 326.23  # AR series
])

# diffusion volume and molecular weight of air, used by the diffusivity correlation
AIR_DIFFUSION_VOLUME: float = 20.1
AIR_MOLECULAR_WEIGHT: float = 28.0

# species without a fit of their own: index -> neighbouring indices
DENSITY_INTERPOLATED = {34: (33, 35)}
HEAT_VAPORIZATION_INTERPOLATED = {5: (4, 6), 7: (6, 8)}
CP_INTERPOLATED = {4: (3, 5), 6: (5, 7), 8: (7, 9), 38: (37, 39)}
THERMAL_CONDUCTIVITY_INTERPOLATED = {2: (1, 3), 5: (4, 6), 8: (7, 9), 32: (31, 33), 34: (33, 35)}
VISCOSITY_INTERPOLATED = {2: (1, 3), 21: (20, 22), 32: (31, 33), 34: (33, 35), 36: (35, 37)}


# water
WATER_COEFFICIENTS = {
    'W': 18.015,
    'Tc': 647.13,
    'Pc': 2.2055e7,
    'Vc': 0.05595,
    'Zc': 0.229,
    'Tt': 273.16,
    'Pt': 6.113e2,
    'Tb': 373.15,
    'omega': 0.3449,
    'rho': {'type': 'NSRDSfunc5', 'coeffs': [98.343885, 0.30542, 647.13, 0.081]},
    'pv': {'type': 'NSRDSfunc1', 'coeffs': [73.649, -7258.2, -7.3037, 4.1653e-06, 2.0]},
    'hl': {'type': 'NSRDSfunc6', 'coeffs': [647.13, 2889425.47876769, 0.3199, -0.212, 0.25795, 0.0]},
    'Cp': {'type': 'NSRDSfunc0', 'coeffs': [15341.1046350264, -116.019983347211, 0.451013044684985,
                                            -0.000783569247849015, 5.20127671384957e-07, 0.0]},
    'sigma': {'type': 'NSRDSfunc6', 'coeffs': [647.13, 0.18548, 2.717, -3.554, 2.047, 0.0]},
    'mu': {'type': 'NSRDSfunc1', 'coeffs': [-51.964, 3670.6, 5.7331, -5.3495e-29, 10.0]},
    'K': {'type': 'NSRDSfunc0', 'coeffs': [-0.4267, 0.0056903, -8.0065e-06, 1.815e-09, 0.0, 0.0]},
    'D': {'type': 'APIdiffCoefFunc', 'coeffs': [15.0, 15.0, 18.015, 28.0]},
}


# hydrocarbon correlations, molar basis unless a scale is given

def _average(i: int, table: Dict[int, tuple], row: Callable[[int], dict]) -> dict:
    lo, hi = table[i]
    return {'type': 'Average', 'coeffs': [row(lo), row(hi)]}

def _density_mass(i: int) -> dict:
    """mass density (kg/m³); species 34 is the mean mass density of its neighbours"""
    if i in DENSITY_INTERPOLATED:
        return _average(i, DENSITY_INTERPOLATED, _density_mass)
    return {'type': 'DensityTau',
            'coeffs': [TC[i], DENSITY_MOLE_BASE[i], DENSITY_MOLE_C1[i], DENSITY_MOLE_C2[i],
                       DENSITY_MOLE_C3[i], DENSITY_MOLE_C4[i]],
            'scale': MOLECULAR_WEIGHTS[i]}

def _vapor_pressure(i: int) -> dict:
    return {'type': 'Wagner25',
            'coeffs': [TC[i], VAPOR_PRESSURE_C1[i], VAPOR_PRESSURE_C2[i], VAPOR_PRESSURE_C3[i],
                       VAPOR_PRESSURE_C4[i], VAPOR_PRESSURE_C5[i]]}

def _heat_vaporization_mole(j: int) -> dict:
    if j in HEAT_VAPORIZATION_INTERPOLATED:
        return _average(j, HEAT_VAPORIZATION_INTERPOLATED, _heat_vaporization_mole)
    return {'type': 'LatentHeatLog',
            'coeffs': [TC[j], H_VAP_C1[j], H_VAP_C2[j], H_VAP_C3[j], H_VAP_C4[j]]}

def _cp_mole(i: int) -> dict:
    if i in CP_INTERPOLATED:
        # molecular weight weighted mean of the neighbours
        lo, hi = CP_INTERPOLATED[i]
        low, high = _cp_mole(lo), _cp_mole(hi)
        low['scale'] = MOLECULAR_WEIGHTS[lo] / MOLECULAR_WEIGHTS[i]
        high['scale'] = MOLECULAR_WEIGHTS[hi] / MOLECULAR_WEIGHTS[i]
        return {'type': 'Average', 'coeffs': [low, high]}
    return {'type': 'CpTau',
            'coeffs': [TC[i], CP_B[i], CP_C1[i], CP_C2[i], CP_C3[i], CP_C4[i]]}

def _thermal_conductivity(i: int) -> dict:
    if i in THERMAL_CONDUCTIVITY_INTERPOLATED:
        return _average(i, THERMAL_CONDUCTIVITY_INTERPOLATED, _thermal_conductivity)
    return {'type': 'NSRDSfunc0',
            'coeffs': [THERMAL_CONDUCTIVITY_C1[i], THERMAL_CONDUCTIVITY_C2[i],
                       THERMAL_CONDUCTIVITY_C3[i], THERMAL_CONDUCTIVITY_C4[i]]}

def _viscosity(i: int) -> dict:
    if i in VISCOSITY_INTERPOLATED:
        return _average(i, VISCOSITY_INTERPOLATED, _viscosity)
    if VISCOSITY_TYPE[i] == 1:
        return {'type': 'ShiftedCubeRootExp',
                'coeffs': [VISCOSITY_C1[i], VISCOSITY_C2[i], VISCOSITY_C3[i], VISCOSITY_C4[i], VISCOSITY_C5[i]]}
    return {'type': 'InversePolynomialExp',
            'coeffs': [VISCOSITY_C1[i], VISCOSITY_C2[i], VISCOSITY_C3[i], VISCOSITY_C4[i]]}

def _to_float(spec):
    """convert numpy scalars to plain floats, recursively"""
    if isinstance(spec, dict):
        return {key: _to_float(value) for key, value in spec.items()}
    if isinstance(spec, list):
        return [_to_float(value) for value in spec]
    if isinstance(spec, np.generic):
        return spec.item()
    return spec

def hydrocarbon_coefficients(i: int) -> dict:
    """return the coefficient set of hydrocarbon i (0-39)

    the iso-alkanes share the heat capacity and viscosity of the n-alkanes, the iso-alkanes and
    cycloalkanes share their thermal conductivity, and all families share the molar heat of
    vaporization of the n-alkane with the same carbon number.
    """
    if not 0 <= i < len(LIQUID_SPECIES_NAMES):
        raise IndexError("index %d out of database range [0, %d]" % (i, len(LIQUID_SPECIES_NAMES) - 1))
    n_alkane = i % 10
    W = MOLECULAR_WEIGHTS[i]
    latent_heat = _heat_vaporization_mole(n_alkane)
    latent_heat['scale'] = 1.0 / W
    cp = _cp_mole(n_alkane if 10 <= i < 20 else i)
    cp['scale'] = 1.0 / W
    coefficients = {
        'W': W,
        'Tc': TC[i],
        'Pc': np.exp(VAPOR_PRESSURE_C5[i]),
        'Vc': 1.0 / DENSITY_MOLE_BASE[i],
        'Tt': DENSITY_T_MIN[i],
        'Tb': T_BOILING[i],
        'rho': _density_mass(i),
        'pv': _vapor_pressure(i),
        'hl': latent_heat,
        'Cp': cp,
        'sigma': {'type': 'BrockBird', 'coeffs': [TC[i], np.exp(VAPOR_PRESSURE_C5[i]), T_BOILING[i]]},
        'mu': _viscosity(n_alkane if 10 <= i < 20 else i),
        'K': _thermal_conductivity(n_alkane if 10 <= i < 30 else i),
        'D': {'type': 'APIdiffCoefFunc', 'coeffs': [V_BP[i], AIR_DIFFUSION_VOLUME, W, AIR_MOLECULAR_WEIGHT]},
    }
    return _to_float(coefficients)


# identifier -> builder of the default coefficient set
LIQUID_DATABASE: Dict[str, Callable[[], dict]] = {
    'H2O': functools.partial(copy.deepcopy, WATER_COEFFICIENTS),
}
for _index, _name in LIQUID_SPECIES_NAMES.items():
    LIQUID_DATABASE[_name] = functools.partial(hydrocarbon_coefficients, _index)


def register_liquid(identifier: str, coefficients: Union[dict, Callable[[], dict]]) -> None:
    """add or replace a default coefficient set

    Args:
        identifier: liquid identifier used in mixture descriptions
        coefficients: coefficient dictionary, or a function returning one
    """
    if callable(coefficients):
        LIQUID_DATABASE[identifier] = coefficients
    elif isinstance(coefficients, dict):
        LIQUID_DATABASE[identifier] = functools.partial(copy.deepcopy, copy.deepcopy(coefficients))
    else:
        raise ConfigurationError(f"coefficients must be a mapping or a callable, got {type(coefficients).__name__}",
                                 component=identifier)

def available_liquids() -> List[str]:
    return list(LIQUID_DATABASE)

def default_coefficients(identifier: str) -> dict:
    """return a fresh copy of the default coefficient set of a liquid

    Exception:
        ConfigurationError: when the identifier is not in the database
    """
    key = resolve_identifier(identifier, LIQUID_DATABASE)
    if key is None:
        raise ConfigurationError("no default coefficients in the liquid database", component=identifier)
    return LIQUID_DATABASE[key]()
