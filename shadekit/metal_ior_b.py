"""Tabulated complex refractive indices (n, k) of iron, titanium, vanadium, vanadium nitride and lithium.

Each table samples the visible range from 360 nm to 830 nm in 5 nm steps.
"""

from __future__ import annotations

FE: tuple[tuple[float, float], ...] = (
    (1.968571429, 2.384285714), (2.000714286, 2.412857143), (2.035384615, 2.440769231),
    (2.073846154, 2.467692308), (2.112307692, 2.494615385), (2.15, 2.52),
    (2.1875, 2.545), (2.225, 2.57), (2.260625, 2.593125), (2.295, 2.615),
    (2.329375, 2.636875), (2.364444444, 2.656666667), (2.400555556, 2.673333333),
    (2.436666667, 2.69), (2.472777778, 2.706666667), (2.502, 2.722),
    (2.5295, 2.737), (2.557, 2.752), (2.5845, 2.767), (2.606, 2.78),
    (2.626, 2.7925), (2.646, 2.805), (2.666, 2.8175), (2.6812, 2.8296),
    (2.6952, 2.8416), (2.7092, 2.8536), (2.7232, 2.8656), (2.7372, 2.8776),
    (2.7592, 2.8848), (2.7832, 2.8908), (2.8072, 2.8968), (2.8312, 2.9028),
    (2.8552, 2.9088), (2.872857143, 2.912857143), (2.888928571, 2.916428571),
    (2.905, 2.92), (2.921071429, 2.923571429), (2.937142857, 2.927142857),
    (2.94969697, 2.931818182), (2.948181818, 2.940909091), (2.946666667, 2.95),
    (2.945151515, 2.959090909), (2.943636364, 2.968181818), (2.942121212, 2.977272727),
    (2.940606061, 2.986363636), (2.934857143, 2.995142857), (2.926285714, 3.003714286),
    (2.917714286, 3.012285714), (2.909142857, 3.020857143), (2.900571429, 3.029428571),
    (2.892, 3.038), (2.883428571, 3.046571429), (2.882857143, 3.053571429),
    (2.887619048, 3.05952381), (2.892380952, 3.06547619), (2.897142857, 3.071428571),
    (2.901904762, 3.077380952), (2.906666667, 3.083333333), (2.911428571, 3.089285714),
    (2.916190476, 3.095238095), (2.918666667, 3.102), (2.912, 3.112),
    (2.905333333, 3.122), (2.898666667, 3.132), (2.892, 3.142), (2.885333333, 3.152),
    (2.878666667, 3.162), (2.872, 3.172), (2.865333333, 3.182), (2.860192308, 3.191730769),
    (2.861153846, 3.200384615), (2.862115385, 3.209038462), (2.863076923, 3.217692308),
    (2.864038462, 3.226346154), (2.865, 3.235), (2.865961538, 3.243653846),
    (2.866923077, 3.252307692), (2.867884615, 3.260961538), (2.868846154, 3.269615385),
    (2.869807692, 3.278269231), (2.874307692, 3.286769231), (2.879692308, 3.295230769),
    (2.885076923, 3.303692308), (2.890461538, 3.312153846), (2.895846154, 3.320615385),
    (2.901230769, 3.329076923), (2.906615385, 3.337538462), (2.912, 3.346),
    (2.917384615, 3.354461538), (2.922769231, 3.362923077), (2.928153846, 3.371384615),
    (2.933538462, 3.379846154), (2.938923077, 3.388307692), (2.941126761, 3.399577465),
    (2.942535211, 3.411549296),
)

TI: tuple[tuple[float, float], ...] = (
    (1.854285714, 2.882857143), (1.882857143, 2.893571429), (1.913846154, 2.904615385),
    (1.948461538, 2.916153846), (1.983076923, 2.927692308), (2.0125, 2.935),
    (2.040625, 2.94125), (2.06875, 2.9475), (2.09125, 2.955625), (2.11, 2.965),
    (2.12875, 2.974375), (2.147777778, 2.983333333), (2.167222222, 2.991666667),
    (2.186666667, 3.0), (2.206111111, 3.008333333), (2.222, 3.016), (2.237, 3.0235),
    (2.252, 3.031), (2.267, 3.0385), (2.28, 3.052), (2.2925, 3.067),
    (2.305, 3.082), (2.3175, 3.097), (2.3264, 3.1144), (2.3344, 3.1324),
    (2.3424, 3.1504), (2.3504, 3.1684), (2.3584, 3.1864), (2.3728, 3.2076),
    (2.3888, 3.2296), (2.4048, 3.2516), (2.4208, 3.2736), (2.4368, 3.2956),
    (2.454285714, 3.318571429), (2.472142857, 3.341785714), (2.49, 3.365),
    (2.507857143, 3.388214286), (2.525714286, 3.411428571), (2.541818182, 3.434545455),
    (2.550909091, 3.457272727), (2.56, 3.48), (2.569090909, 3.502727273),
    (2.578181818, 3.525454545), (2.587272727, 3.548181818), (2.596363636, 3.570909091),
    (2.606, 3.592), (2.616, 3.612), (2.626, 3.632), (2.636, 3.652),
    (2.646, 3.672), (2.656, 3.692), (2.666, 3.712), (2.676428571, 3.728571429),
    (2.687142857, 3.742857143), (2.697857143, 3.757142857), (2.708571429, 3.771428571),
    (2.719285714, 3.785714286), (2.73, 3.8), (2.740714286, 3.814285714), (2.751428571, 3.828571429),
    (2.762222222, 3.842666667), (2.773333333, 3.856), (2.784444444, 3.869333333),
    (2.795555556, 3.882666667), (2.806666667, 3.896), (2.817777778, 3.909333333),
    (2.828888889, 3.922666667), (2.84, 3.936), (2.851111111, 3.949333333),
    (2.862692308, 3.960961538), (2.876153846, 3.965769231), (2.889615385, 3.970576923),
    (2.903076923, 3.975384615), (2.916538462, 3.980192308), (2.93, 3.985),
    (2.943461538, 3.989807692), (2.956923077, 3.994615385), (2.970384615, 3.999423077),
    (2.983846154, 4.004230769), (2.997307692, 4.009038462), (3.012923077, 4.01),
    (3.029076923, 4.01), (3.045230769, 4.01), (3.061384615, 4.01), (3.077538462, 4.01),
    (3.093692308, 4.01), (3.109846154, 4.01), (3.126, 4.01), (3.142153846, 4.01),
    (3.158307692, 4.01), (3.174461538, 4.01), (3.190615385, 4.01), (3.206769231, 4.01),
    (3.214507042, 4.007183099), (3.220140845, 4.003661972),
)

V: tuple[tuple[float, float], ...] = (
    (2.582857143, 3.365714286), (2.643571429, 3.387142857), (2.709230769, 3.407692308),
    (2.782307692, 3.426923077), (2.855384615, 3.446153846), (2.92, 3.4575),
    (2.9825, 3.466875), (3.045, 3.47625), (3.115, 3.481875), (3.19, 3.485),
    (3.265, 3.488125), (3.333333333, 3.49), (3.391666667, 3.49), (3.45, 3.49),
    (3.508333333, 3.49), (3.534, 3.484), (3.5515, 3.4765), (3.569, 3.469),
    (3.5865, 3.4615), (3.634, 3.444), (3.689, 3.424), (3.744, 3.404),
    (3.799, 3.384), (3.8276, 3.3608), (3.8496, 3.3368), (3.8716, 3.3128),
    (3.8936, 3.2888), (3.9156, 3.2648), (3.9104, 3.2472), (3.8984, 3.2312),
    (3.8864, 3.2152), (3.8744, 3.1992), (3.8624, 3.1832), (3.88, 3.16),
    (3.905, 3.135), (3.93, 3.11), (3.955, 3.085), (3.98, 3.06),
    (3.994848485, 3.038787879), (3.969090909, 3.032727273), (3.943333333, 3.026666667),
    (3.917575758, 3.020606061), (3.891818182, 3.014545455), (3.866060606, 3.008484848),
    (3.84030303, 3.002424242), (3.805142857, 3.001714286), (3.763714286, 3.004571429),
    (3.722285714, 3.007428571), (3.680857143, 3.010285714), (3.639428571, 3.013142857),
    (3.598, 3.016), (3.556571429, 3.018857143), (3.519285714, 3.025),
    (3.484761905, 3.033333333), (3.450238095, 3.041666667), (3.415714286, 3.05),
    (3.381190476, 3.058333333), (3.346666667, 3.066666667), (3.312142857, 3.075),
    (3.277619048, 3.083333333), (3.248444444, 3.091333333), (3.240666667, 3.098),
    (3.232888889, 3.104666667), (3.225111111, 3.111333333), (3.217333333, 3.118),
    (3.209555556, 3.124666667), (3.201777778, 3.131333333), (3.194, 3.138),
    (3.186222222, 3.144666667), (3.180384615, 3.150961538), (3.182307692, 3.155769231),
    (3.184230769, 3.160576923), (3.186153846, 3.165384615), (3.188076923, 3.170192308),
    (3.19, 3.175), (3.191923077, 3.179807692), (3.193846154, 3.184615385),
    (3.195769231, 3.189423077), (3.197692308, 3.194230769), (3.199615385, 3.199038462),
    (3.197538462, 3.203076923), (3.194461538, 3.206923077), (3.191384615, 3.210769231),
    (3.188307692, 3.214615385), (3.185230769, 3.218461538), (3.182153846, 3.222307692),
    (3.179076923, 3.226153846), (3.176, 3.23), (3.172923077, 3.233846154),
    (3.169846154, 3.237692308), (3.166769231, 3.241538462), (3.163692308, 3.245384615),
    (3.160615385, 3.249230769), (3.157746479, 3.255070423), (3.154929577, 3.261408451),
)

VN: tuple[tuple[float, float], ...] = (
    (2.175093063, 1.59177665), (2.170862944, 1.601928934), (2.166632826, 1.612081218),
    (2.162402707, 1.622233503), (2.158172589, 1.632385787), (2.15394247, 1.642538071),
    (2.149712352, 1.652690355), (2.145482234, 1.66284264), (2.141252115, 1.672994924),
    (2.137021997, 1.683147208), (2.132791878, 1.693299492), (2.130823245, 1.705762712),
    (2.133244552, 1.722711864), (2.13566586, 1.739661017), (2.138087167, 1.756610169),
    (2.140508475, 1.773559322), (2.142929782, 1.790508475), (2.14535109, 1.807457627),
    (2.147772397, 1.82440678), (2.150193705, 1.841355932), (2.152615012, 1.858305085),
    (2.15503632, 1.875254237), (2.157457627, 1.89220339), (2.159878935, 1.909152542),
    (2.162300242, 1.926101695), (2.16472155, 1.943050847), (2.167142857, 1.96),
    (2.169564165, 1.976949153), (2.175951613, 1.996201613), (2.183209677, 2.015959677),
    (2.190467742, 2.035717742), (2.197725806, 2.055475806), (2.204983871, 2.075233871),
    (2.212241935, 2.094991935), (2.2195, 2.11475), (2.226758065, 2.134508065),
    (2.234016129, 2.154266129), (2.241274194, 2.174024194), (2.248532258, 2.193782258),
    (2.255790323, 2.213540323), (2.263048387, 2.233298387), (2.270306452, 2.253056452),
    (2.277564516, 2.272814516), (2.284822581, 2.292572581), (2.292080645, 2.312330645),
    (2.29933871, 2.33208871), (2.306596774, 2.351846774), (2.313854839, 2.371604839),
    (2.321112903, 2.391362903), (2.328370968, 2.411120968), (2.335629032, 2.430879032),
    (2.342887097, 2.450637097), (2.350183841, 2.470217707), (2.359375907, 2.481103048),
    (2.368567973, 2.491988389), (2.377760039, 2.50287373), (2.386952104, 2.513759071),
    (2.39614417, 2.524644412), (2.405336236, 2.535529753), (2.414528302, 2.546415094),
    (2.423720368, 2.557300435), (2.432912433, 2.568185776), (2.442104499, 2.579071118),
    (2.451296565, 2.589956459), (2.460488631, 2.6008418), (2.469680697, 2.611727141),
    (2.478872762, 2.622612482), (2.488064828, 2.633497823), (2.497256894, 2.644383164),
    (2.50644896, 2.655268505), (2.515641026, 2.666153846), (2.524833091, 2.677039187),
    (2.534025157, 2.687924528), (2.543217223, 2.698809869), (2.552409289, 2.70969521),
    (2.561601355, 2.720580552), (2.57079342, 2.731465893), (2.579985486, 2.742351234),
    (2.589177552, 2.753236575), (2.598369618, 2.764121916), (2.607561684, 2.775007257),
    (2.616753749, 2.785892598), (2.625945815, 2.796777939), (2.635137881, 2.80766328),
    (2.644329947, 2.818548621), (2.653522013, 2.829433962), (2.662714078, 2.840319303),
    (2.671906144, 2.851204644), (2.68109821, 2.862089985), (2.690290276, 2.872975327),
    (2.699482342, 2.883860668), (2.708674407, 2.894746009), (2.717866473, 2.90563135),
    (2.727058539, 2.916516691), (2.733784176, 2.926087588),
)

LI: tuple[tuple[float, float], ...] = (
    (0.3093694896, 1.551618053), (0.303494375, 1.580608125), (0.2954704779, 1.607933493),
    (0.2906108913, 1.634534724), (0.2839774394, 1.659737734), (0.277387047, 1.683940839),
    (0.2723517073, 1.707465366), (0.2681302362, 1.730262677), (0.2625129268, 1.752152805),
    (0.2558056098, 1.783433293), (0.2495064254, 1.813613796), (0.2433283452, 1.839464736),
    (0.237044465, 1.857966876), (0.2307925, 1.892823191), (0.2257989067, 1.919315307),
    (0.22209224, 1.93620864), (0.2168825225, 1.96834955), (0.2118802484, 1.999772174),
    (0.2071535404, 2.030163478), (0.201618503, 2.059007365), (0.1962138337, 2.087298868),
    (0.1923627945, 2.114354296), (0.1886596222, 2.140744), (0.1851540667, 2.166244),
    (0.1805051444, 2.198260759), (0.1751789412, 2.234137765), (0.1717437616, 2.259857472),
    (0.1689123124, 2.282334347), (0.1656800198, 2.312320138), (0.1623549209, 2.344044447),
    (0.1593099241, 2.374155806), (0.1563402846, 2.403833226), (0.1535770792, 2.432204795),
    (0.1509110191, 2.459961847), (0.148790401, 2.486881665), (0.1472559634, 2.512901718),
    (0.1458201169, 2.540118815), (0.1448101002, 2.572506127), (0.1438000835, 2.604893439),
    (0.1438082428, 2.629614473), (0.1440838019, 2.652322141), (0.1444524485, 2.676618146),
    (0.1450512281, 2.704840877), (0.1456500076, 2.733063608), (0.1460149235, 2.764252629),
    (0.1462625564, 2.79692925), (0.1465101894, 2.82960587), (0.1470538889, 2.85453),
    (0.1476233333, 2.87878), (0.1481807143, 2.903183545), (0.1484485714, 2.931272169),
    (0.1487164286, 2.959360794), (0.1489886038, 2.98749756), (0.1495263396, 3.018595044),
    (0.1500640755, 3.049692528), (0.1506018113, 3.080790013), (0.15112474, 3.109828183),
    (0.1516447639, 3.138462373), (0.1521647878, 3.167096563), (0.152889983, 3.1946365),
    (0.1538287238, 3.221037521), (0.1547674645, 3.247438542), (0.1557062053, 3.273839563),
    (0.1563975081, 3.302050698), (0.1570795704, 3.330329431), (0.1577616327, 3.358608163),
    (0.1584818293, 3.387203049), (0.1593227846, 3.416799085), (0.1601637398, 3.446395122),
    (0.1610046951, 3.475991159), (0.1617818234, 3.505818676), (0.1624128215, 3.536176161),
    (0.1630438196, 3.566533647), (0.1636748177, 3.596891132), (0.1643836923, 3.626885538),
    (0.1655873122, 3.654573321), (0.1667909321, 3.682261104), (0.167994552, 3.709948887),
    (0.1691981719, 3.73763667), (0.1700401022, 3.765525434), (0.170738569, 3.793493918),
    (0.1714370358, 3.821462402), (0.1721355026, 3.849430886), (0.17284576, 3.87739856),
    (0.17413376, 3.90532656), (0.17542176, 3.93325456), (0.17670976, 3.96118256),
    (0.17799776, 3.98911056), (0.1792768042, 4.017031013), (0.1801170143, 4.04458165),
    (0.1809572243, 4.072132288), (0.1817974344, 4.099682926), (0.1826376444, 4.127233563),
    (0.1834778545, 4.154784201), (0.1844895579, 4.181916168),
)