'''
Built-in English inflection tables.

Pattern rules are compiled case insensitive and tried from the last one to
the first one, so more specific rules are placed lower than general ones.
'''

irregular_rules = [
    # pronouns
    ('I', 'we'), ('me', 'us'), ('he', 'they'), ('she', 'they'),
    ('them', 'them'), ('myself', 'ourselves'), ('yourself', 'yourselves'),
    ('itself', 'themselves'), ('herself', 'themselves'),
    ('himself', 'themselves'), ('themself', 'themselves'), ('is', 'are'),
    ('was', 'were'), ('has', 'have'), ('this', 'these'), ('that', 'those'),
    ('my', 'our'), ('its', 'their'), ('his', 'their'), ('her', 'their'),

    # consonant and "o"
    ('echo', 'echoes'), ('dingo', 'dingoes'), ('volcano', 'volcanoes'),
    ('tornado', 'tornadoes'), ('torpedo', 'torpedoes'),

    # "us" ending
    ('genus', 'genera'), ('viscus', 'viscera'),

    # "ma" ending
    ('stigma', 'stigmata'), ('stoma', 'stomata'), ('dogma', 'dogmata'),
    ('lemma', 'lemmata'), ('schema', 'schemata'), ('anathema', 'anathemata'),

    # others
    ('ox', 'oxen'), ('axe', 'axes'), ('die', 'dice'), ('yes', 'yeses'),
    ('foot', 'feet'), ('eave', 'eaves'), ('goose', 'geese'),
    ('tooth', 'teeth'), ('quiz', 'quizzes'), ('human', 'humans'),
    ('proof', 'proofs'), ('carve', 'carves'), ('valve', 'valves'),
    ('looey', 'looies'), ('thief', 'thieves'), ('groove', 'grooves'),
    ('pickaxe', 'pickaxes'), ('passerby', 'passersby'),
    ('canvas', 'canvases'), ('woman', 'women'), ('louse', 'lice'),
    ('child', 'children'), ('mouse', 'mice'), ('man', 'men'),
]

plural_rules = [
    (r's?$', 's'),
    (r'[^\x00-\x7f]$', '$0'),
    (r'([^aeiou]ese)$', '$1'),
    (r'(ax|test)is$', '$1es'),
    (r'(alias|[^aou]us|t[lm]as|gas|ris)$', '$1es'),
    (r'(e[mn]u)s?$', '$1s'),
    (r'([^l]ias|[aeiou]las|[ejzr]as|[iu]am)$', '$1'),
    (r'(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter'
     r'|loc|strat)(?:us|i)$', '$1i'),
    (r'(alumn|alg|vertebr)(?:a|ae)$', '$1ae'),
    (r'(seraph|cherub)(?:im)?$', '$1im'),
    (r'(her|at|gr)o$', '$1oes'),
    (r'(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr'
     r'|errat|ov|symposi|curricul|automat|quor)(?:a|um)$', '$1a'),
    (r'(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ'
     r'|prolegomen|hedr|automat)(?:a|on)$', '$1a'),
    (r'sis$', 'ses'),
    (r'(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$', '$1$2ves'),
    (r'([^aeiouy]|qu)y$', '$1ies'),
    (r'([^ch][ieo][ln])ey$', '$1ies'),
    (r'(x|ch|ss|sh|zz)$', '$1es'),
    (r'(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$', '$1ices'),
    (r'\b((?:tit)?m|l)(?:ice|ouse)$', '$1ice'),
    (r'(pe)(?:rson|ople)$', '$1ople'),
    (r'(child)(?:ren)?$', '$1ren'),
    (r'eaux$', '$0'),
    (r'm[ae]n$', 'men'),
    (r'^thou$', 'you'),
]

singular_rules = [
    (r's$', ''),
    (r'(ss)$', '$1'),
    (r'(wi|kni|(?:after|half|high|low|mid|non|night|[^\w]|^)li)ves$', '$1fe'),
    (r'(ar|(?:wo|[ae])l|[eo][ao])ves$', '$1f'),
    (r'ies$', 'y'),
    (r'(dg|ss|ois|lk|ok|wn|mb|th|ch|ec|oal|is|ck|ix|sser|ts|wb)ies$', '$1ie'),
    (r'\b(l|(?:neck|cross|hog|aun)?t|coll|faer|food|gen|goon|group|hipp|junk'
     r'|vegg|(?:pork)?p|charl|calor|cut)ies$', '$1ie'),
    (r'\b(mon|smil)ies$', '$1ey'),
    (r'\b((?:tit)?m|l)ice$', '$1ouse'),
    (r'(seraph|cherub)im$', '$1'),
    (r'(x|ch|ss|sh|zz|tto|go|cho|alias|[^aou]us|t[lm]as|gas|(?:her|at|gr)o'
     r'|[aeiou]ris)(?:es)?$', '$1'),
    (r'(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)(?:sis|ses)$',
     '$1sis'),
    (r'(movie|twelve|abuse|e[mn]u)s$', '$1'),
    (r'(test)(?:is|es)$', '$1is'),
    (r'(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter'
     r'|loc|strat)(?:us|i)$', '$1us'),
    (r'(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr'
     r'|errat|ov|symposi|curricul|quor)a$', '$1um'),
    (r'(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ'
     r'|prolegomen|hedr|automat)a$', '$1on'),
    (r'(alumn|alg|vertebr)ae$', '$1a'),
    (r'(cod|mur|sil|vert|ind)ices$', '$1ex'),
    (r'(matr|append)ices$', '$1ix'),
    (r'(pe)(rson|ople)$', '$1rson'),
    (r'(child)ren$', '$1'),
    (r'(eau)x?$', '$1'),
    (r'men$', 'man'),
]

uncountable_words = [
    'adulthood', 'advice', 'agenda', 'aid', 'aircraft', 'alcohol', 'ammo',
    'analytics', 'anime', 'athletics', 'audio', 'bison', 'blood', 'bream',
    'buffalo', 'butter', 'carp', 'cash', 'chassis', 'chess', 'clothing',
    'cod', 'commerce', 'cooperation', 'corps', 'debris', 'diabetes',
    'digestion', 'elk', 'energy', 'equipment', 'excretion', 'expertise',
    'firmware', 'flounder', 'fun', 'gallows', 'garbage', 'graffiti',
    'hardware', 'headquarters', 'health', 'herpes', 'highjinks', 'homework',
    'housework', 'information', 'jeans', 'justice', 'kudos', 'labour',
    'literature', 'machinery', 'mackerel', 'mail', 'media', 'mews', 'moose',
    'music', 'mud', 'manga', 'news', 'only', 'personnel', 'pike', 'plankton',
    'pliers', 'police', 'pollution', 'premises', 'rain', 'research', 'rice',
    'salmon', 'scissors', 'series', 'sewage', 'shambles', 'shrimp',
    'software', 'species', 'staff', 'swine', 'tennis', 'traffic',
    'transportation', 'trout', 'tuna', 'wealth', 'welfare', 'whiting',
    'wildebeest', 'wildlife', 'you',
]

uncountable_patterns = [
    r'pok[eé]mon$',
    r'[^aeiou]ese$',
    r'deer$',
    r'fish$',
    r'measles$',
    r'o[iu]s$',
    r'pox$',
    r'sheep$',
]
