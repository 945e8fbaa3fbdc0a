"""
Bundled store definitions.

Each entry is validated by StoreDefinition when the registry is built.
Patterns are compiled case-insensitively unless ``case_sensitive`` is set;
group 1 (and group 2, when present) of every match is a candidate ID.
"""

STORE_DEFINITIONS: tuple[dict, ...] = (
    {
        "id": "5246",
        "name": "Target",
        "domain": "target.com",
        "pathname_patterns": [r"\ba-(\d{6,24})\b"],
        "pattern_formats": ["A-00000000"],
    },
    {
        "id": "9528",
        "name": "Nike",
        "domain": "nike.com",
        # /t/air-max-270-mens-shoe/AH8050-001
        "pathname_patterns": [r"/(\w{6,16}-\w{3})\b"],
    },
    {
        "id": "4207",
        "name": "Ulta",
        "domain": "ulta.com",
        "pathname_patterns": [r"\b((?:pimprod|xlsimpprod|\d){6,24})(?:$|\b)"],
    },
    {
        "id": "8378",
        "name": "QVC",
        "domain": "qvc.com",
        "pathname_patterns": [r"\bproduct\.(\w{6,24})\.html"],
    },
    {
        "id": "2524",
        "name": "Zappos",
        "domain": "zappos.com",
        "pathname_patterns": [r"/asin/(\w{6,24})(?:$|\b)"],
    },
    {
        "id": "2946",
        "name": "Walmart",
        "domain": "walmart.com",
        "pathname_patterns": [r"/ip/[\w-]+/(\d{6,24})(?:$|\b)"],
    },
    {
        "id": "10086",
        "name": "Sam's Club",
        "domain": "samsclub.com",
        # /ip/seort/16675013342, /ip/slug/prod24921152, /p/slug/P03002770
        "pathname_patterns": [r"/(?:ip|p)/[\w-]+/(\w{6,24})(?:$|\b)"],
        "transform_id": {"pattern": r"^(?:prod|p)", "replacement": ""},
    },
    {
        "id": "3864",
        "name": "Gap",
        "domain": "gap.com",
        "aliases": [
            {"id": "13943", "domain": "gapfactory.com"},
            {"id": "3726", "domain": "oldnavy.gap.com"},
            {"id": "9311", "domain": "bananarepublic.gap.com"},
            {"id": "15061", "domain": "bananarepublicfactory.gapfactory.com"},
            {"id": "10168", "domain": "athleta.gap.com"},
        ],
    },
    {
        "id": "12205",
        "name": "Saks Off 5th",
        "domain": "saksoff5th.com",
        "pathname_patterns": [r"\b(\d{6,24})\.html"],
    },
    {
        "id": "13467",
        "name": "H&M",
        "domain": "hm.com",
        "pathname_patterns": [r"\bproductpage\.(\d{6,16})\.html"],
    },
    {
        "id": "16788",
        "name": "Chewy",
        "domain": "chewy.com",
        "pathname_patterns": [r"\bdp/(\w{6,24})\b"],
    },
    {
        "id": "9141",
        "name": "Ann Taylor",
        "domain": "anntaylor.com",
        "pathname_patterns": [
            r"\bgrp_(\d{4,16})_\d{1,8}\.html",
            r"\bgrp_([\d_]{4,16})\.html",
        ],
    },
    {
        "id": "9205",
        "name": "Love Scent",
        "domain": "love-scent.com",
        "pathname_patterns": [r"\b(p-\d{1,16})\.html"],
        "transform_id": {"pattern": r"^p-", "replacement": "sku-"},
    },
    {
        "id": "16016",
        "name": "Mountain Warehouse",
        "domain": "mountainwarehouse.com",
        "pathname_patterns": [r"-p(\d{4,16})\.aspx"],
    },
    {
        "id": "2302",
        "name": "REI",
        "domain": "rei.com",
        "pathname_patterns": [r"\bproduct/(\d{5,24})/"],
    },
    {
        "id": "13957",
        "name": "Uniqlo",
        "domain": "uniqlo.com",
        "pathname_patterns": [r"\bproducts/([\w-]{5,24})/"],
    },
    {
        "id": "2442",
        "name": "Crate & Barrel",
        "domain": "crateandbarrel.com",
        "pathname_patterns": [r"/s(\w{4,24})$"],
    },
    {
        "id": "2445",
        "name": "West Elm",
        "domain": "westelm.com",
        "pathname_patterns": [r"-(\w{5,24})$"],
    },
    {
        "id": "4767",
        "name": "Best Buy",
        "domain": "bestbuy.com",
        "pathname_patterns": [r"\b(\d{4,24})\.p$"],
    },
    {
        "id": "5487",
        "name": "Adidas",
        "domain": "adidas.com",
        "pathname_patterns": [r"\b(\w{6,24})\.html"],
    },
    {
        "id": "18859",
        "name": "Dr. Martens",
        "domain": "drmartens.com",
        "pathname_patterns": [r"\bp/(\w{5,24})$"],
    },
    {
        "id": "7206",
        "name": "Kohl's",
        "domain": "kohls.com",
        "aliases": [{"id": "7206", "domain": "m.kohls.com"}],
        # /product/prd-7692699/product-name.jsp?skuId=76565656
        "pathname_patterns": [
            r"/product/(prd-\d{6,12})/",
            r"/product/prd-(\d{6,12})/",
        ],
        "query_param_names": ["skuId"],
    },
    {
        "id": "8302",
        "name": "Ace Hardware",
        "domain": "acehardware.com",
        # /product/8061802, /product/F001289?variationProductCode=7008474
        "pathname_patterns": [r"/product/(\w{4,12})(?:$|\b)"],
        "query_patterns": [r"variationproductcode=(\d{4,12})\b"],
    },
    {
        "id": "13349",
        "name": "Nordstrom Rack",
        "domain": "nordstromrack.com",
        "pathname_patterns": [r"/s/(\d{4,24})(?:/|$)"],
    },
    {
        "id": "10437",
        "name": "Columbia Sportswear",
        "domain": "columbia.com",
        # /p/endor-issue-ball-cap-2165511.html, /p/polo-1929591_fla.html
        "pathname_patterns": [r"-([a-z\d]{6,15})(?:\.html|_)"],
    },
    {
        "id": "3866",
        "name": "Lands' End",
        "domain": "landsend.com",
        # /products/womens-poplin-shirt/id_395103, /pp/StylePage-553141_A7.html
        "pathname_patterns": [
            r"/id_(\d{5,8})",
            r"/pp/stylepage-(\d{5,8})_",
        ],
    },
    {
        "id": "8973",
        "name": "IKEA",
        "domain": "ikea.com",
        # /us/en/p/poaeng-armchair-s49032421, article numbers drop the leading s
        "pathname_patterns": [r"\b(\w{1,16})$"],
        "transform_id": {"pattern": "s", "replacement": ""},
    },
    {
        "id": "20571",
        "name": "MagneticMe",
        "domain": "magneticme.com",
        "pathname_patterns": [r"/([\w-]{4,24})$"],
        "transform_id": {"pattern": "_", "replacement": "-"},
    },
    {
        "id": "9898",
        "name": "Lab Series",
        "domain": "labseries.com",
        "pathname_patterns": [r"/product/\d{1,16}/(\d{4,16})/"],
    },
    {
        "id": "22077",
        "name": "The Inside",
        "domain": "theinside.com",
        "pathname_patterns": [r"\b(\d{5,16})$"],
    },
    {
        "id": "10045",
        "name": "Smashbox",
        "domain": "smashbox.com",
        "pathname_patterns": [r"\bproduct/\d{1,16}/(\d{5,16})/"],
    },
    {
        "id": "14393",
        "name": "Rocky Boots",
        "domain": "rockyboots.com",
        "pathname_patterns": [
            r"\b(\w{1,24})\.html",
            r"/(\w{1,5}\d{3,8})(?:_|$|\b)",
        ],
        "pattern_formats": ["XXX0000__X__000", "XXX0000__X__000_", "XX0000"],
    },
    {
        "id": "4690",
        "name": "Maidenform",
        "domain": "maidenform.com",
        "pathname_patterns": [r"/(\w{5,24})$"],
        "pattern_formats": ["XX0000", "XXXXXX"],
    },
    {
        "id": "16522",
        "name": "Kathy Kuo Home",
        "domain": "kathykuohome.com",
        "pathname_patterns": [r"\bproduct/detail/(\d{3,24})\b"],
    },
    {
        "id": "16274",
        "name": "Fairway Golf",
        "domain": "fairwaygolfusa.com",
        "pathname_patterns": [r"\bpid/(\d{3,24})$"],
    },
    {
        "id": "4489",
        "name": "Famous Footwear",
        "domain": "famousfootwear.com",
        "pathname_patterns": [
            r"-(\d{5,24})/\b",
            r"\b(\d{5,24})$",
        ],
    },
    {
        "id": "10269",
        "name": "Care.com",
        "domain": "care.com",
        "pathname_patterns": [r"\b(\d{4,24})-"],
    },
    {
        "id": "9428",
        "name": "American Eagle",
        "domain": "ae.com",
        "pathname_patterns": [r"(?:/p/|\b)([\d_]{4,24})$"],
    },
    {
        "id": "12539",
        "name": "Zoro",
        "domain": "zoro.com",
        "pathname_patterns": [r"\b(\w{5,24})$"],
    },
    {
        "id": "2440",
        "name": "Dick's Sporting Goods",
        "domain": "dickssportinggoods.com",
        "pathname_patterns": [r"/(\w{4,24})$"],
    },
    {
        "id": "8980",
        "name": "Kate Spade",
        "domain": "katespade.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "8979",
        "name": "Journeys",
        "domain": "journeys.com",
        "pathname_patterns": [r"-(\d{4,24})$"],
    },
    {
        "id": "8978",
        "name": "Jos. A. Bank",
        "domain": "josbank.com",
        "pathname_patterns": [r"-(\w{4,24})$"],
    },
    {
        "id": "8976",
        "name": "JCPenney",
        "domain": "jcpenney.com",
        "pathname_patterns": [r"/product/(\w{4,24})$"],
    },
    {
        "id": "8981",
        "name": "Kirkland's",
        "domain": "kirklands.com",
        "pathname_patterns": [r"\b(\d{6,24})\.uts"],
    },
    {
        "id": "8031",
        "name": "Rugs USA",
        "domain": "rugsusa.com",
        "pathname_patterns": [r"\b([\w-]{6,24})\.html"],
    },
    {
        "id": "16000",
        "name": "Funko",
        "domain": "funko.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "22484",
        "name": "Loungefly",
        "domain": "loungefly.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "8972",
        "name": "iHerb",
        "domain": "iherb.com",
        "pathname_patterns": [r"\b(\d{5,24})$"],
    },
    {
        "id": "8970",
        "name": "Houzz",
        "domain": "houzz.com",
        "pathname_patterns": [r"\b(\d{5,24})$"],
    },
    {
        "id": "8963",
        "name": "Harry & David",
        "domain": "harryanddavid.com",
        "pathname_patterns": [r"\b(\d{5,24})$"],
    },
    {
        "id": "12621",
        "name": "Golf Galaxy",
        "domain": "golfgalaxy.com",
        "pathname_patterns": [r"\b(\w{5,24})$"],
    },
    {
        "id": "10228",
        "name": "Discount School Supply",
        "domain": "discountschoolsupply.com",
        "pathname_patterns": [r"\bp/(\w{4,24})$"],
    },
    {
        "id": "22043",
        "name": "Cuisinart",
        "domain": "cuisinart.com",
        "pathname_patterns": [r"\b([\w-]{4,24})\.html"],
    },
    {
        "id": "8965",
        "name": "HealthyPets",
        "domain": "healthypets.com",
        "pathname_patterns": [r"\b(\d{5,24})\.html"],
    },
    {
        "id": "19196",
        "name": "Circus NY",
        "domain": "circusny.com",
        "pathname_patterns": [r"(?:\b|-)(\w{5,24})$"],
    },
    {
        "id": "8933",
        "name": "The Children's Place",
        "domain": "childrensplace.com",
        "pathname_patterns": [r"-(\d{5,24}-\w{2,24})$"],
    },
    {
        "id": "8962",
        "name": "Harbor Freight",
        "domain": "harborfreight.com",
        "pathname_patterns": [r"\b(\d{5,24})\.html"],
    },
    {
        "id": "9609",
        "name": "Champs Sports",
        "domain": "champssports.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        # Costco is tracked under the same store ID as COS
        "id": "16829",
        "name": "COS",
        "domain": "cos.com",
        "aliases": [{"id": "16829", "domain": "costco.com"}],
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "19490",
        "name": "ACME Markets",
        "domain": "acmemarkets.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "2144",
        "name": "Charles Tyrwhitt",
        "domain": "charlestyrwhitt.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "10530",
        "name": "Teva",
        "domain": "teva.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "18125",
        "name": "& Other Stories",
        "domain": "stories.com",
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "2880",
        "name": "Wayfair",
        "domain": "wayfair.com",
        # /furniture/pdp/desk-chair-w004211738.html
        "pathname_patterns": [r"\b(\w{5,24})\.html"],
    },
    {
        "id": "16349",
        "name": "Baggallini",
        "domain": "baggallini.com",
        "pathname_patterns": [r"\b([\w-]{2,24})\.html"],
    },
    {
        "id": "20026",
        "name": "Arlo",
        "domain": "arlo.com",
        "pathname_patterns": [r"\b([\w-]{5,24})\.html"],
    },
    {
        "id": "22489",
        "name": "Lodge Cast Iron",
        "domain": "lodgecastiron.com",
        "pathname_patterns": [r"\b([\w-]{4,24})\.html"],
    },
    {
        "id": "8442",
        "name": "Stacy Adams",
        "domain": "stacyadams.com",
        "pathname_patterns": [r"\b([\w-]{4,24})\.html"],
    },
    {
        "id": "16449",
        "name": "Camp Chef",
        "domain": "campchef.com",
        "pathname_patterns": [r"\b([\w-]{4,24})\.html"],
    },
    {
        "id": "14991",
        "name": "boohooMAN",
        "domain": "boohooman.com",
        "pathname_patterns": [r"\b([\w-]{4,24})\.html"],
    },
    {
        "id": "15159",
        "name": "1STOPlighting",
        "domain": "1stoplighting.com",
        "pathname_patterns": [r"_([\w-]{1,24})\.htm"],
    },
    {
        "id": "6326",
        "name": "Lillian Vernon",
        "domain": "lillianvernon.com",
        "pathname_patterns": [r"\b(\w{4,24})\.html"],
    },
    {
        "id": "9443",
        "name": "Kiehl's",
        "domain": "kiehls.com",
        "pathname_patterns": [r"\b(\w{3,24})\.html"],
    },
    {
        "id": "8380",
        "name": "Lamps Plus",
        "domain": "lampsplus.com",
        "pathname_patterns": [r"__(\w{4,24})\.html"],
    },
    {
        "id": "10904",
        "name": "Haggar",
        "domain": "haggar.com",
        "pathname_patterns": [r"\b(\d{4,24})\.html"],
    },
    {
        "id": "19546",
        "name": "Dancewear Solutions",
        "domain": "dancewearsolutions.com",
        "pathname_patterns": [r"\b(\d{4,24})\.aspx"],
    },
    {
        "id": "2447",
        "name": "Overstock",
        "domain": "overstock.com",
        "pathname_patterns": [r"\b(\d{4,24})/product\.html"],
    },
    {
        "id": "10722",
        "name": "Lowe's",
        "domain": "lowes.com",
        # /pd/craftsman-hammer/1000595447
        "pathname_patterns": [r"\b(\d{4,24})$"],
    },
    {
        "id": "3865",
        "name": "J.Crew",
        "domain": "jcrew.com",
        "pathname_patterns": [r"\bp/(\w{4,24})$"],
    },
    {
        # Regional storefronts share the store ID; product handles carry no ID
        "id": "15861",
        "name": "Gymshark",
        "domain": "gymshark.com",
        "aliases": [
            {"id": "15861", "domain": "us.shop.gymshark.com"},
            {"id": "15861", "domain": "ca.gymshark.com"},
            {"id": "15861", "domain": "uk.gymshark.com"},
            {"id": "15861", "domain": "au.gymshark.com"},
            {"id": "15861", "domain": "de.gymshark.com"},
            {"id": "15861", "domain": "fr.gymshark.com"},
        ],
    },
    {
        "id": "10752",
        "name": "Carter's",
        "domain": "carters.com",
        # /p/kid-dark-wash-straight-leg-jeans/V_3N376010
        "pathname_patterns": [r"/(v_\w{6,12})(?:$|\.html|\b)"],
    },
)
