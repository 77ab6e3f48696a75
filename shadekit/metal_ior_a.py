"""Tabulated complex refractive indices (n, k) of silver, aluminium, gold, copper and brass.

Each table samples the visible range from 360 nm to 830 nm in 5 nm steps.
"""

from __future__ import annotations

AG: tuple[tuple[float, float], ...] = (
    (0.1937697969, 1.542775784), (0.1863794945, 1.611995116), (0.1919493526, 1.641277522),
    (0.1989955973, 1.666440869), (0.1985622426, 1.718246893), (0.194492584, 1.779166452),
    (0.1878545676, 1.838499847), (0.180016041, 1.894456342), (0.1729970816, 1.950617723),
    (0.1727111067, 2.01114909), (0.1728184204, 2.070960395), (0.1714506271, 2.12871668),
    (0.1669451194, 2.183143955), (0.1623365906, 2.234233918), (0.1595063655, 2.282830594),
    (0.1585064387, 2.329077209), (0.157540771, 2.374538697), (0.1553781177, 2.421513092),
    (0.1516909674, 2.470420468), (0.1475535859, 2.519120932), (0.1433830656, 2.567380701),
    (0.139524076, 2.613547767), (0.136052175, 2.658984755), (0.1330996471, 2.703442166),
    (0.1314127294, 2.746217439), (0.1304769255, 2.787994397), (0.1301526264, 2.830014841),
    (0.1300240817, 2.872113229), (0.1299751091, 2.91763738), (0.1299444802, 2.963951269),
    (0.1299611827, 3.009739205), (0.1299905863, 3.055386004), (0.1300194835, 3.097640223),
    (0.1300481421, 3.138296806), (0.1298398444, 3.178399908), (0.1293764383, 3.21790713),
    (0.1286377125, 3.25768637), (0.126707271, 3.298643034), (0.1247768295, 3.339599698),
    (0.1229918902, 3.380331699), (0.1212451994, 3.421004641), (0.1199247512, 3.461363987),
    (0.1196626603, 3.500944672), (0.1194005694, 3.540525357), (0.1197220763, 3.57951429),
    (0.1203364144, 3.618206299), (0.1209507524, 3.656898309), (0.122437242, 3.69393488),
    (0.1239997394, 3.73082718), (0.1255724448, 3.76774829), (0.1273912211, 3.805363891),
    (0.1292099974, 3.842979492), (0.1310255041, 3.880650044), (0.1326376071, 3.921739011),
    (0.1342497102, 3.962827979), (0.1358618132, 4.003916947), (0.1370939161, 4.045474725),
    (0.1382518772, 4.087123972), (0.1394098384, 4.128773219), (0.1400087579, 4.169896413),
    (0.1400266186, 4.210472834), (0.1400444793, 4.251049256), (0.14006234, 4.291625677),
    (0.1400467045, 4.331115513), (0.1400297838, 4.370563658), (0.140012863, 4.410011804),
    (0.1402627758, 4.448910495), (0.1413585553, 4.486067405), (0.1424543348, 4.523224315),
    (0.1435501144, 4.560381225), (0.1445817677, 4.597457767), (0.1454664645, 4.634350128),
    (0.1463511613, 4.671242489), (0.1472358582, 4.70813485), (0.1479344888, 4.745183096),
    (0.1474537322, 4.783219419), (0.1469729757, 4.821255743), (0.1464922192, 4.859292066),
    (0.1460114627, 4.89732839), (0.1454365913, 4.935859112), (0.144824417, 4.974585793),
    (0.1442122427, 5.013312474), (0.1436000683, 5.052039155), (0.1429982714, 5.090786172),
    (0.1429108603, 5.130541219), (0.1428234492, 5.170296267), (0.1427360381, 5.210051314),
    (0.142648627, 5.249806361), (0.1425723274, 5.28955854), (0.1430293242, 5.329173053),
    (0.1434863209, 5.368787566), (0.1439433177, 5.408402079), (0.1444003145, 5.448016592),
    (0.1448573113, 5.487631105), (0.1458370844, 5.526618752),
)

AL: tuple[tuple[float, float], ...] = (
    (0.3970816731, 4.372694111), (0.4077589264, 4.433990231), (0.418897724, 4.492555044),
    (0.4303707087, 4.551616268), (0.4421600534, 4.614741667), (0.4541161368, 4.67865256),
    (0.4660888111, 4.740831653), (0.4780633756, 4.801045767), (0.4901259804, 4.860607995),
    (0.5024709476, 4.920186112), (0.5148594252, 4.98035513), (0.5271883634, 5.041784988),
    (0.5393679384, 5.105134767), (0.5517333395, 5.168119932), (0.5643557083, 5.229618068),
    (0.5772300992, 5.289613676), (0.5905420465, 5.347553738), (0.6040955128, 5.407318213),
    (0.6179529129, 5.469422816), (0.6320824311, 5.529687301), (0.6462718721, 5.590148464),
    (0.660482672, 5.65362818), (0.6748840364, 5.716104038), (0.6895410892, 5.777232979),
    (0.7046480176, 5.83859207), (0.720021938, 5.900087752), (0.7359216949, 5.959791837),
    (0.7519897821, 6.018922398), (0.7686498231, 6.078175846), (0.7854463268, 6.137457624),
    (0.8028348113, 6.198608797), (0.8203821522, 6.260261616), (0.8386797108, 6.323296574),
    (0.8573305628, 6.38698241), (0.8764468509, 6.447290903), (0.8960642301, 6.503963331),
    (0.9159949541, 6.561749865), (0.9372819846, 6.624358778), (0.9585690152, 6.686967692),
    (0.9810199444, 6.747420906), (1.00377683, 6.807307448), (1.026571944, 6.86642986),
    (1.049461979, 6.923654947), (1.072352014, 6.980880034), (1.09697412, 7.036373115),
    (1.122465327, 7.090997129), (1.147956533, 7.145621142), (1.172357097, 7.201101937),
    (1.196662613, 7.2566574), (1.221053742, 7.312239202), (1.247508671, 7.368455925),
    (1.273963599, 7.424672648), (1.300447877, 7.48084599), (1.328757979, 7.534320627),
    (1.357068081, 7.587795265), (1.385378183, 7.641269902), (1.415004287, 7.692507287),
    (1.444887155, 7.743308163), (1.474770023, 7.794109039), (1.505291566, 7.846412705),
    (1.536476938, 7.900278348), (1.56766231, 7.95414399), (1.598847682, 8.008009632),
    (1.636212234, 8.061731762), (1.67381387, 8.115448386), (1.711415507, 8.169165009),
    (1.750357498, 8.220966763), (1.793548436, 8.266698344), (1.836739375, 8.312429926),
    (1.879930313, 8.358161508), (1.92676609, 8.403121288), (1.981954663, 8.446312345),
    (2.037143236, 8.489503402), (2.092331808, 8.532694459), (2.148323782, 8.571541441),
    (2.209408138, 8.582853359), (2.270492494, 8.594165277), (2.33157685, 8.605477194),
    (2.392661206, 8.616789112), (2.443547792, 8.616950201), (2.490392437, 8.612691597),
    (2.537237082, 8.608432993), (2.584081727, 8.604174388), (2.630672449, 8.599406663),
    (2.664676766, 8.569402853), (2.698681083, 8.539399044), (2.732685401, 8.509395235),
    (2.766689718, 8.479391426), (2.799770355, 8.449464163), (2.788518896, 8.423210758),
    (2.777267437, 8.396957353), (2.766015978, 8.370703948), (2.754764518, 8.344450542),
    (2.743513059, 8.318197137), (2.720695662, 8.297934788),
)

AU: tuple[tuple[float, float], ...] = (
    (1.726248938, 1.85351432), (1.715366257, 1.863314429), (1.706064787, 1.882606367),
    (1.697249651, 1.903089421), (1.687649576, 1.918247288), (1.678419475, 1.930449961),
    (1.670683654, 1.940870883), (1.664236481, 1.949568629), (1.65791634, 1.956026265),
    (1.649718391, 1.95860004), (1.641447387, 1.958665792), (1.634036283, 1.956373797),
    (1.62832588, 1.951644869), (1.620192447, 1.943974091), (1.60950048, 1.934899111),
    (1.596334777, 1.924566534), (1.574347605, 1.911390537), (1.54564322, 1.896316753),
    (1.508458089, 1.878849833), (1.464300542, 1.861030919), (1.418607767, 1.843105381),
    (1.372368565, 1.824999235), (1.321224482, 1.810205112), (1.263499312, 1.799854871),
    (1.189900705, 1.796461427), (1.106881535, 1.797196701), (1.020243859, 1.813977192),
    (0.9324478308, 1.835894063), (0.8511633401, 1.886770717), (0.7713799478, 1.944323443),
    (0.6997216254, 2.01763491), (0.6302436408, 2.095175186), (0.5720483809, 2.183785131),
    (0.5191663921, 2.277608014), (0.4729087806, 2.371122542), (0.4337830078, 2.464305093),
    (0.3975742176, 2.55493212), (0.3739915268, 2.634497614), (0.3504088361, 2.714063108),
    (0.3330124947, 2.777848319), (0.3172423721, 2.837485333), (0.3017966941, 2.886640402),
    (0.2871566093, 2.909768875), (0.2725165246, 2.932897347), (0.259956335, 2.947748068),
    (0.2484397721, 2.958445271), (0.2369232091, 2.969142474), (0.2284544796, 2.98437242),
    (0.2202513683, 2.999997394), (0.2121329686, 3.01559273), (0.2060566022, 3.030473627),
    (0.1999802358, 3.045354524), (0.1939191333, 3.060049764), (0.1888075871, 3.063195331),
    (0.1836960409, 3.066340898), (0.1785844947, 3.069486465), (0.1748119963, 3.090003429),
    (0.1713007593, 3.113909724), (0.1677895223, 3.137816018), (0.1653049288, 3.19112208),
    (0.1638874119, 3.274985782), (0.162469895, 3.358849484), (0.1610523781, 3.442713186),
    (0.1607413412, 3.537425847), (0.1604727581, 3.632554764), (0.160204175, 3.727683682),
    (0.1600533107, 3.81752775), (0.160275617, 3.890618759), (0.1604979233, 3.963709768),
    (0.1607202296, 4.036800777), (0.1611028001, 4.107318852), (0.1618526449, 4.171940592),
    (0.1626024896, 4.236562331), (0.1633523344, 4.301184071), (0.1641695585, 4.364805488),
    (0.1654138695, 4.422086324), (0.1666581804, 4.479367161), (0.1679024914, 4.536647998),
    (0.1691468023, 4.593928835), (0.1704911848, 4.648281823), (0.1718752311, 4.701474343),
    (0.1732592774, 4.754666863), (0.1746433237, 4.807859383), (0.1760212613, 4.861051445),
    (0.1770963978, 4.914220796), (0.1781715343, 4.967390146), (0.1792466708, 5.020559496),
    (0.1803218073, 5.073728847), (0.1814003566, 5.126824152), (0.1826427052, 5.17636564),
    (0.1838850538, 5.225907128), (0.1851274025, 5.275448616), (0.1863697511, 5.324990104),
    (0.1876120997, 5.374531592), (0.1892216027, 5.419107323),
)

CU: tuple[tuple[float, float], ...] = (
    (1.280194277, 1.933855609), (1.268689452, 1.951404436), (1.249454471, 1.972017413),
    (1.228044971, 2.009613911), (1.206443503, 2.094096699), (1.188222279, 2.173641903),
    (1.177668194, 2.196398007), (1.174512775, 2.166785883), (1.175019456, 2.13023396),
    (1.176925956, 2.153160001), (1.17878947, 2.185819898), (1.179539754, 2.219803367),
    (1.178201378, 2.248311125), (1.176091783, 2.275352885), (1.174279952, 2.301176317),
    (1.172821392, 2.325841178), (1.171013765, 2.349021495), (1.168719322, 2.371732113),
    (1.165807858, 2.393856878), (1.162672611, 2.415201883), (1.159567491, 2.436338568),
    (1.156862101, 2.457221663), (1.154051412, 2.477448453), (1.15109944, 2.496794652),
    (1.147587828, 2.514696715), (1.14374408, 2.531741714), (1.139769271, 2.546829525),
    (1.135752506, 2.561290804), (1.133619762, 2.574287551), (1.131921339, 2.58694668),
    (1.127238808, 2.595373925), (1.121755502, 2.602665556), (1.111475832, 2.602081192),
    (1.098937456, 2.597787857), (1.081428899, 2.592924859), (1.058569421, 2.587448559),
    (1.032979456, 2.582490839), (0.99557063, 2.579777786), (0.9581618042, 2.577064733),
    (0.9110551652, 2.583613136), (0.8613992414, 2.592596117), (0.806270476, 2.607659851),
    (0.7375526842, 2.63782205), (0.6688348924, 2.667984248), (0.602742548, 2.709812819),
    (0.5379675717, 2.757495213), (0.4731925953, 2.805177608), (0.4307115553, 2.873436349),
    (0.3901734284, 2.943488315), (0.3502061367, 3.01376963), (0.3239992232, 3.089579534),
    (0.2977923097, 3.165389439), (0.2717950365, 3.241085789), (0.2588393901, 3.309717969),
    (0.2458837437, 3.378350149), (0.2329280974, 3.44698233), (0.2266090293, 3.51114933),
    (0.2215848227, 3.574445129), (0.216560616, 3.637740929), (0.2133396824, 3.696847125),
    (0.2119930413, 3.751598715), (0.2106464003, 3.806350306), (0.2092997592, 3.861101896),
    (0.2102199705, 3.911461865), (0.2112271572, 3.961653335), (0.2122343439, 4.011844806),
    (0.213198011, 4.061549402), (0.2140237201, 4.109710601), (0.2148494292, 4.157871801),
    (0.2156751383, 4.206033), (0.2167420483, 4.253445104), (0.2183617129, 4.299140522),
    (0.2199813776, 4.344835941), (0.2216010422, 4.390531359), (0.2234161891, 4.435844004),
    (0.2264704069, 4.478730425), (0.2295246247, 4.521616847), (0.2325788425, 4.564503268),
    (0.2356330603, 4.607389689), (0.2385586145, 4.649670161), (0.2414331723, 4.691710462),
    (0.24430773, 4.733750763), (0.2471822878, 4.775791063), (0.250016566, 4.817858856),
    (0.2508542723, 4.86128937), (0.2516919787, 4.904719884), (0.252529685, 4.948150398),
    (0.2533673914, 4.991580912), (0.2542102449, 5.034989516), (0.2553001363, 5.077346572),
    (0.2563900276, 5.119703628), (0.257479919, 5.162060685), (0.2585698103, 5.204417741),
    (0.2596597017, 5.246774797), (0.2624130423, 5.287222134),
)

CUZN: tuple[tuple[float, float], ...] = (
    (1.503, 1.815), (1.5, 1.8165), (1.497, 1.818), (1.492, 1.818),
    (1.487, 1.818), (1.479, 1.8155), (1.471, 1.813), (1.458, 1.809),
    (1.445, 1.805), (1.425, 1.7995), (1.405, 1.794), (1.3775, 1.79),
    (1.35, 1.786), (1.314, 1.785), (1.278, 1.784), (1.2345, 1.7905),
    (1.191, 1.797), (1.1425, 1.813), (1.094, 1.829), (1.044, 1.856),
    (0.994, 1.883), (0.947, 1.92), (0.9, 1.957), (0.858, 2.0015),
    (0.816, 2.046), (0.7805, 2.0955), (0.745, 2.145), (0.7155, 2.1975),
    (0.686, 2.25), (0.6625, 2.304), (0.639, 2.358), (0.6205, 2.411),
    (0.602, 2.464), (0.5875, 2.516), (0.573, 2.568), (0.561, 2.618),
    (0.549, 2.668), (0.538, 2.7165), (0.527, 2.765), (0.516, 2.8125),
    (0.505, 2.86), (0.4945, 2.909), (0.484, 2.958), (0.476, 3.0085),
    (0.468, 3.059), (0.464, 3.109), (0.46, 3.159), (0.455, 3.206),
    (0.45, 3.253), (0.451, 3.299), (0.452, 3.345), (0.4505, 3.3895),
    (0.449, 3.434), (0.447, 3.478), (0.445, 3.522), (0.4445, 3.5655),
    (0.444, 3.609), (0.444, 3.652), (0.444, 3.695), (0.4445, 3.7365),
    (0.445, 3.778), (0.4445, 3.819), (0.444, 3.86), (0.444, 3.9015),
    (0.444, 3.943), (0.4445, 3.984), (0.445, 4.025), (0.4455, 4.0655),
    (0.446, 4.106), (0.447, 4.146), (0.448, 4.186), (0.449, 4.226),
    (0.45, 4.266), (0.451, 4.306), (0.452, 4.346), (0.4535, 4.385),
    (0.455, 4.424), (0.456, 4.4625), (0.457, 4.501), (0.4575, 4.54),
    (0.458, 4.579), (0.459, 4.618), (0.46, 4.657), (0.462, 4.697),
    (0.464, 4.737), (0.4665, 4.7755), (0.469, 4.814), (0.471, 4.852),
    (0.473, 4.89), (0.4755, 4.9275), (0.478, 4.965), (0.4795, 5.002),
    (0.481, 5.039), (0.482, 5.077), (0.483, 5.115),
)