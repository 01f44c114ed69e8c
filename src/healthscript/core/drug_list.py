"""
Static formulary used for drug search, voice and handwriting recognition.
"""

DRUG_LIST = [
    "Acetaminophen",
    "Aceclofenac",
    "Acyclovir",
    "Adalimumab",
    "Albendazole",
    "Albuterol",
    "Alendronate",
    "Allopurinol",
    "Alprazolam",
    "Amiodarone",
    "Amitriptyline",
    "Amlodipine",
    "Amoxicillin",
    "Amoxicillin Clavulanate",
    "Ampicillin",
    "Anastrozole",
    "Apixaban",
    "Aripiprazole",
    "Aspirin",
    "Atenolol",
    "Atorvastatin",
    "Azathioprine",
    "Azithromycin",
    "Baclofen",
    "Beclomethasone",
    "Benzonatate",
    "Betamethasone",
    "Bisoprolol",
    "Budesonide",
    "Bupropion",
    "Buspirone",
    "Calcitriol",
    "Calcium Carbonate",
    "Candesartan",
    "Captopril",
    "Carbamazepine",
    "Carvedilol",
    "Cefadroxil",
    "Cefixime",
    "Cefpodoxime",
    "Ceftriaxone",
    "Cefuroxime",
    "Celecoxib",
    "Cephalexin",
    "Cetirizine",
    "Chlorpheniramine",
    "Chlorthalidone",
    "Cholecalciferol",
    "Ciprofloxacin",
    "Citalopram",
    "Clarithromycin",
    "Clindamycin",
    "Clobazam",
    "Clonazepam",
    "Clonidine",
    "Clopidogrel",
    "Clotrimazole",
    "Codeine",
    "Colchicine",
    "Cyclobenzaprine",
    "Dapagliflozin",
    "Desloratadine",
    "Dexamethasone",
    "Diazepam",
    "Diclofenac",
    "Dicyclomine",
    "Digoxin",
    "Diltiazem",
    "Diphenhydramine",
    "Domperidone",
    "Donepezil",
    "Doxycycline",
    "Duloxetine",
    "Empagliflozin",
    "Enalapril",
    "Enoxaparin",
    "Escitalopram",
    "Esomeprazole",
    "Estradiol",
    "Ethambutol",
    "Etoricoxib",
    "Famotidine",
    "Febuxostat",
    "Fenofibrate",
    "Fexofenadine",
    "Finasteride",
    "Fluconazole",
    "Fluoxetine",
    "Fluticasone",
    "Folic Acid",
    "Furosemide",
    "Gabapentin",
    "Gliclazide",
    "Glimepiride",
    "Glipizide",
    "Haloperidol",
    "Heparin",
    "Hydralazine",
    "Hydrochlorothiazide",
    "Hydrocortisone",
    "Hydroxychloroquine",
    "Hydroxyzine",
    "Ibuprofen",
    "Indomethacin",
    "Insulin Glargine",
    "Ipratropium",
    "Irbesartan",
    "Isoniazid",
    "Isosorbide Mononitrate",
    "Itraconazole",
    "Ivermectin",
    "Ketoconazole",
    "Ketorolac",
    "Labetalol",
    "Lactulose",
    "Lamotrigine",
    "Lansoprazole",
    "Letrozole",
    "Levetiracetam",
    "Levocetirizine",
    "Levofloxacin",
    "Levothyroxine",
    "Linagliptin",
    "Lisinopril",
    "Lithium",
    "Loperamide",
    "Loratadine",
    "Lorazepam",
    "Losartan",
    "Mebendazole",
    "Meloxicam",
    "Metformin",
    "Methotrexate",
    "Methylprednisolone",
    "Metoclopramide",
    "Metoprolol",
    "Metronidazole",
    "Montelukast",
    "Morphine",
    "Moxifloxacin",
    "Mupirocin",
    "Naproxen",
    "Nebivolol",
    "Nifedipine",
    "Nitrofurantoin",
    "Nitroglycerin",
    "Norfloxacin",
    "Nystatin",
    "Ofloxacin",
    "Olanzapine",
    "Olmesartan",
    "Omeprazole",
    "Ondansetron",
    "Oseltamivir",
    "Oxcarbazepine",
    "Pantoprazole",
    "Paracetamol",
    "Paroxetine",
    "Phenytoin",
    "Pioglitazone",
    "Prednisolone",
    "Prednisone",
    "Pregabalin",
    "Promethazine",
    "Propranolol",
    "Quetiapine",
    "Rabeprazole",
    "Ramipril",
    "Ranitidine",
    "Rifampicin",
    "Risperidone",
    "Rivaroxaban",
    "Rosuvastatin",
    "Salbutamol",
    "Sertraline",
    "Sildenafil",
    "Simvastatin",
    "Sitagliptin",
    "Sodium Valproate",
    "Spironolactone",
    "Sucralfate",
    "Sumatriptan",
    "Tamsulosin",
    "Telmisartan",
    "Terbinafine",
    "Thyroxine",
    "Ticagrelor",
    "Tinidazole",
    "Topiramate",
    "Torsemide",
    "Tramadol",
    "Tranexamic Acid",
    "Trazodone",
    "Valacyclovir",
    "Valsartan",
    "Venlafaxine",
    "Verapamil",
    "Vildagliptin",
    "Vitamin B12",
    "Warfarin",
    "Zinc Sulfate",
    "Zolpidem",
]
