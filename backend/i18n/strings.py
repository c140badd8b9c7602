"""English and Arabic string tables. Placeholders use ``{name}`` syntax."""

TRANSLATIONS: dict[str, dict] = {
    "en": {
        "labels": {
            "revenue": "Annual Revenue",
            "ebitda": "EBITDA",
            "net_income": "Net Income",
            "total_assets": "Total Assets",
            "total_liabilities": "Total Liabilities",
            "user_country_risk_premium": "Country Risk Premium",
            "user_sector_growth_rate": "Sector Growth Rate",
            "user_industry_pe_ratio": "Industry P/E Ratio",
            "user_industry_ev_ebitda_multiple": "Industry EV/EBITDA Multiple",
            "user_industry_revenue_multiple": "Industry Revenue Multiple",
            "projection_years": "Projection Years",
            "discount_rate": "Discount Rate (WACC)",
            "terminal_growth_rate": "Terminal Growth Rate",
            "projected_fcf": "Projected Free Cash Flows",
            "projected_fcf_year": "Projected FCF Year {year}",
            "estimated_value": "Estimated Value",
        },
        "validation": {
            "fill_fields": "Please fill in all required fields.",
            "invalid_number": "Please enter a valid number.",
            "dcf_inputs": "DCF inputs: ensure all fields are filled, projection years match the FCF entries, and all are valid numbers.",
        },
        "calculation": {
            "introduction": "This valuation was calculated using the {methodName} method.",
            "data_source_note": (
                "Data sources: all figures are user-provided inputs and benchmarks; no external market "
                "data was retrieved. This estimate is indicative only, is not an IFRS 13 fair value "
                "measurement, and should be reviewed by a qualified professional."
            ),
            "dcf": {
                "intro": "The DCF method values the company as the present value of its projected free cash flows plus a terminal value.",
                "wacc_title": "Discount Rate (WACC)",
                "wacc_explanation": "The discount rate reflects the required return of capital providers and is entered directly as a percentage.",
                "crp_note": "(User-supplied benchmark: Country Risk Premium {value}; shown for reference, not added to the discount rate)",
                "fcf_title": "Free Cash Flow (FCF)",
                "fcf_explanation": "Free cash flow is the cash generated after operating expenses and capital expenditure that is available to all capital providers.",
                "inputs_header": "Inputs Used",
                "projection_period": "Projection period: {value} years",
                "wacc": "Discount rate (WACC): {value}",
                "terminal_growth": "Terminal growth rate: {value}",
                "sector_growth_used": "User-supplied sector growth rate of {value} replaces the entered terminal growth rate of {inputValue}",
                "fcf_list": "Projected free cash flows:",
                "fcf_year": "Year {year}: {value}",
                "step1_header": "Step 1: Present Value of Projected FCF",
                "step1_desc": "Each year's FCF is discounted by (1 + WACC)^year. Sum of present values: {pvSum}",
                "pv_fcf_calc": "Year {year}: {fcf} / (1 + {waccDecimal})^{year} = {pvFcf}",
                "step2_header": "Step 2: Terminal Value",
                "step2_desc": "The terminal value captures cash flows beyond the projection period, based on the final-year FCF of {lastFcf}.",
                "last_fcf_estimated": "(Final-year FCF not available; estimated from the first year's FCF grown at 2% per year.)",
                "tv_ggm": "Gordon Growth Model: {lastFcf} x (1 + {terminalGrowthDecimal}) / ({waccDecimal} - {terminalGrowthDecimal}) = {tv}",
                "tv_fallback": (
                    "Fallback applied: the terminal growth rate ({terminalGrowthDecimal}) is not below the discount rate "
                    "({waccDecimal}), so the Gordon Growth Model does not converge. Terminal value = {lastFcf} x 10 = {tv}"
                ),
                "step3_header": "Step 3: Present Value of Terminal Value",
                "step3_desc": "{tv} / (1 + {waccDecimal})^{projectionYears} = {pvTv}",
                "step4_header": "Step 4: Enterprise Value",
                "step4_desc": "{pvSum} + {pvTv} = {ev}",
                "step5_header": "Step 5: Liquidity Discount",
                "step5_desc": "A {discountPercentage}% marketability discount is applied to reflect the private company's lower liquidity: {ev} x {discountFactor} = {discountedEv}",
                "step6_header": "Step 6: Final Estimated Value",
                "step6_desc": "Estimated value (rounded): {finalValue}",
                "min_val_note": "Minimum value of {floor} applied because the calculated value was below this floor.",
            },
            "book": {
                "intro": "The Book Value method values the company at its net assets as reported on the balance sheet.",
                "inputs_header": "Inputs Used",
                "total_assets": "Total assets: {value}",
                "total_liabilities": "Total liabilities: {value}",
                "step1_header": "Step 1: Net Book Value",
                "step1_desc": "{totalAssets} - {totalLiabilities} = {bookValue}",
                "step2_header": "Step 2: Final Estimated Value",
                "step2_desc": "Estimated value: {finalValue}",
                "min_val_note": "Minimum value of {floor} applied because the net book value was below this floor.",
            },
            "other": {
                "intro": "This method applies a valuation multiple to a base financial metric of the company.",
                "inputs_header": "Inputs Used",
                "input_line": "{label}: {value}",
                "benchmark_line": "{label}: {value} (user-supplied)",
                "step1_header": "Step 1: Base Metric and Multiple",
                "step1_pe_ratio": "Net income of {netIncome} with the user-supplied industry P/E ratio of {peRatio}",
                "step1_ev_ebitda": "EBITDA of {ebitda} with the user-supplied industry EV/EBITDA multiple of {evEbitdaMultiple}",
                "step1_revenue_multiple": "Revenue of {revenue} with the user-supplied industry revenue multiple of {revMultiple}",
                "step1_comps_heuristic": "Base value: {baseValue} (revenue x 0.2 + EBITDA - total liabilities); applied multiplier: {multiplier}",
                "step1_default_revenue_multiple": "Base value: {baseValue} (annual revenue); applied multiplier: {multiplier}",
                "heuristic_note": "(No usable benchmark multiple was supplied, so a heuristic base value and a default multiplier of {multiplier} were used.)",
                "default_multiple_note": "(No usable revenue multiple was supplied, so a default multiplier of {multiplier} was used.)",
                "step2_header": "Step 2: Calculated Value",
                "step2_pe_ratio": "{netIncome} x {peRatio} = {estimatedValue}",
                "step2_ev_ebitda": "{ebitda} x {evEbitdaMultiple} = {estimatedValue}",
                "step2_revenue_multiple": "{revenue} x {revMultiple} = {estimatedValue}",
                "step2_generic": "{baseValue} x {multiplier} = {estimatedValue}",
                "step3_header": "Step 3: Final Estimated Value",
                "step3_desc": "Estimated value (rounded): {finalValue}",
                "min_val_note": "Minimum value of {floor} applied because the calculated value was below this floor.",
            },
        },
        "summary": (
            "Based on the {methodName}, the estimated valuation for {companyName} is approximately "
            "{value} {currencyCode}. This considers key financial figures and assumptions (including any "
            "user-provided benchmarks) for the {sectorName} sector in {countryName}. Please review the "
            "IFRS compliance notes and consult a professional."
        ),
        "report": {
            "title": "Valuation Report",
            "company_details": "Company Details",
            "company_name": "Company Name",
            "country": "Country",
            "sector": "Sector",
            "valuation_method": "Valuation Method",
            "currency": "Currency",
            "estimated_value": "Estimated Value",
            "dcf_inputs_title": "DCF Inputs",
            "dcf_projection_years": "Projection years: {value} years",
            "dcf_discount_rate": "Discount rate (WACC): {value}",
            "dcf_terminal_growth_rate": "Terminal growth rate: {value}",
            "benchmarks_title": "User-Provided Benchmarks",
            "summary": "Summary",
            "chart": "Chart",
            "calculation_title": "Calculation Details",
            "ifrs_compliance_note": (
                "This report is generated for informational purposes. Valuations under IFRS 13 require "
                "observable market inputs and professional judgement; consult a qualified valuer before "
                "relying on these figures."
            ),
        },
    },
    "ar": {
        "labels": {
            "revenue": "الإيرادات السنوية",
            "ebitda": "الأرباح قبل الفوائد والضرائب والإهلاك والاستهلاك",
            "net_income": "صافي الدخل",
            "total_assets": "إجمالي الأصول",
            "total_liabilities": "إجمالي الالتزامات",
            "user_country_risk_premium": "علاوة مخاطر الدولة",
            "user_sector_growth_rate": "معدل نمو القطاع",
            "user_industry_pe_ratio": "مضاعف الربحية للقطاع",
            "user_industry_ev_ebitda_multiple": "مضاعف قيمة المنشأة إلى الأرباح التشغيلية للقطاع",
            "user_industry_revenue_multiple": "مضاعف الإيرادات للقطاع",
            "projection_years": "سنوات التوقع",
            "discount_rate": "معدل الخصم (متوسط تكلفة رأس المال المرجح)",
            "terminal_growth_rate": "معدل النمو النهائي",
            "projected_fcf": "التدفقات النقدية الحرة المتوقعة",
            "projected_fcf_year": "التدفق النقدي الحر المتوقع للسنة {year}",
            "estimated_value": "القيمة المقدرة",
        },
        "validation": {
            "fill_fields": "يرجى تعبئة جميع الحقول المطلوبة.",
            "invalid_number": "يرجى إدخال رقم صحيح.",
            "dcf_inputs": "مدخلات التدفقات النقدية المخصومة: تأكد من تعبئة جميع الحقول وتطابق سنوات التوقع مع التدفقات النقدية وأن جميعها أرقام صحيحة.",
        },
        "calculation": {
            "introduction": "تم احتساب هذا التقييم باستخدام طريقة {methodName}.",
            "data_source_note": (
                "مصادر البيانات: جميع الأرقام مدخلات ومعايير مقدمة من المستخدم، ولم يتم جلب أي بيانات سوقية "
                "خارجية. هذا التقدير استرشادي فقط، ولا يمثل قياسًا للقيمة العادلة وفق المعيار الدولي "
                "لإعداد التقارير المالية 13، ويجب مراجعته من قبل مختص مؤهل."
            ),
            "dcf": {
                "intro": "تقيّم طريقة التدفقات النقدية المخصومة الشركة بالقيمة الحالية لتدفقاتها النقدية الحرة المتوقعة مضافًا إليها القيمة النهائية.",
                "wacc_title": "معدل الخصم (متوسط التكلفة المرجح لرأس المال)",
                "wacc_explanation": "يعكس معدل الخصم العائد المطلوب لمقدمي رأس المال ويتم إدخاله مباشرة كنسبة مئوية.",
                "crp_note": "(معيار مقدم من المستخدم: علاوة مخاطر الدولة {value}؛ معروضة للاطلاع ولا تضاف إلى معدل الخصم)",
                "fcf_title": "التدفق النقدي الحر",
                "fcf_explanation": "التدفق النقدي الحر هو النقد المتولد بعد المصاريف التشغيلية والنفقات الرأسمالية والمتاح لجميع مقدمي رأس المال.",
                "inputs_header": "المدخلات المستخدمة",
                "projection_period": "فترة التوقع: {value} سنوات",
                "wacc": "معدل الخصم: {value}",
                "terminal_growth": "معدل النمو النهائي: {value}",
                "sector_growth_used": "معدل نمو القطاع المقدم من المستخدم {value} يحل محل معدل النمو النهائي المدخل {inputValue}",
                "fcf_list": "التدفقات النقدية الحرة المتوقعة:",
                "fcf_year": "السنة {year}: {value}",
                "step1_header": "الخطوة ١: القيمة الحالية للتدفقات النقدية المتوقعة",
                "step1_desc": "يتم خصم التدفق النقدي لكل سنة بمعامل (١ + معدل الخصم)^السنة. مجموع القيم الحالية: {pvSum}",
                "pv_fcf_calc": "السنة {year}: {fcf} / (1 + {waccDecimal})^{year} = {pvFcf}",
                "step2_header": "الخطوة ٢: القيمة النهائية",
                "step2_desc": "تمثل القيمة النهائية التدفقات النقدية بعد فترة التوقع، بناءً على التدفق النقدي للسنة الأخيرة البالغ {lastFcf}.",
                "last_fcf_estimated": "(التدفق النقدي للسنة الأخيرة غير متوفر؛ تم تقديره من تدفق السنة الأولى بنمو سنوي ٢٪.)",
                "tv_ggm": "نموذج جوردن للنمو: {lastFcf} x (1 + {terminalGrowthDecimal}) / ({waccDecimal} - {terminalGrowthDecimal}) = {tv}",
                "tv_fallback": (
                    "تم تطبيق بديل: معدل النمو النهائي ({terminalGrowthDecimal}) ليس أقل من معدل الخصم "
                    "({waccDecimal})، لذلك لا يتقارب نموذج جوردن للنمو. القيمة النهائية = {lastFcf} x 10 = {tv}"
                ),
                "step3_header": "الخطوة ٣: القيمة الحالية للقيمة النهائية",
                "step3_desc": "{tv} / (1 + {waccDecimal})^{projectionYears} = {pvTv}",
                "step4_header": "الخطوة ٤: قيمة المنشأة",
                "step4_desc": "{pvSum} + {pvTv} = {ev}",
                "step5_header": "الخطوة ٥: خصم السيولة",
                "step5_desc": "يطبق خصم قابلية التسويق بنسبة {discountPercentage}٪ ليعكس انخفاض سيولة الشركة الخاصة: {ev} x {discountFactor} = {discountedEv}",
                "step6_header": "الخطوة ٦: القيمة المقدرة النهائية",
                "step6_desc": "القيمة المقدرة (مقربة): {finalValue}",
                "min_val_note": "تم تطبيق الحد الأدنى للقيمة {floor} لأن القيمة المحسوبة كانت أقل من هذا الحد.",
            },
            "book": {
                "intro": "تقيّم طريقة القيمة الدفترية الشركة بصافي أصولها كما هو مدرج في الميزانية العمومية.",
                "inputs_header": "المدخلات المستخدمة",
                "total_assets": "إجمالي الأصول: {value}",
                "total_liabilities": "إجمالي الالتزامات: {value}",
                "step1_header": "الخطوة ١: صافي القيمة الدفترية",
                "step1_desc": "{totalAssets} - {totalLiabilities} = {bookValue}",
                "step2_header": "الخطوة ٢: القيمة المقدرة النهائية",
                "step2_desc": "القيمة المقدرة: {finalValue}",
                "min_val_note": "تم تطبيق الحد الأدنى للقيمة {floor} لأن صافي القيمة الدفترية كان أقل من هذا الحد.",
            },
            "other": {
                "intro": "تطبق هذه الطريقة مضاعف تقييم على مقياس مالي أساسي للشركة.",
                "inputs_header": "المدخلات المستخدمة",
                "input_line": "{label}: {value}",
                "benchmark_line": "{label}: {value} (مقدم من المستخدم)",
                "step1_header": "الخطوة ١: المقياس الأساسي والمضاعف",
                "step1_pe_ratio": "صافي الدخل {netIncome} مع مضاعف الربحية للقطاع المقدم من المستخدم {peRatio}",
                "step1_ev_ebitda": "الأرباح التشغيلية {ebitda} مع مضاعف قيمة المنشأة المقدم من المستخدم {evEbitdaMultiple}",
                "step1_revenue_multiple": "الإيرادات {revenue} مع مضاعف الإيرادات المقدم من المستخدم {revMultiple}",
                "step1_comps_heuristic": "القيمة الأساسية: {baseValue} (الإيرادات x 0.2 + الأرباح التشغيلية - إجمالي الالتزامات)؛ المضاعف المطبق: {multiplier}",
                "step1_default_revenue_multiple": "القيمة الأساسية: {baseValue} (الإيرادات السنوية)؛ المضاعف المطبق: {multiplier}",
                "heuristic_note": "(لم يتم تقديم مضاعف معياري قابل للاستخدام، لذلك استخدمت قيمة أساسية تقديرية ومضاعف افتراضي {multiplier}.)",
                "default_multiple_note": "(لم يتم تقديم مضاعف إيرادات قابل للاستخدام، لذلك استخدم مضاعف افتراضي {multiplier}.)",
                "step2_header": "الخطوة ٢: القيمة المحسوبة",
                "step2_pe_ratio": "{netIncome} x {peRatio} = {estimatedValue}",
                "step2_ev_ebitda": "{ebitda} x {evEbitdaMultiple} = {estimatedValue}",
                "step2_revenue_multiple": "{revenue} x {revMultiple} = {estimatedValue}",
                "step2_generic": "{baseValue} x {multiplier} = {estimatedValue}",
                "step3_header": "الخطوة ٣: القيمة المقدرة النهائية",
                "step3_desc": "القيمة المقدرة (مقربة): {finalValue}",
                "min_val_note": "تم تطبيق الحد الأدنى للقيمة {floor} لأن القيمة المحسوبة كانت أقل من هذا الحد.",
            },
        },
        "summary": (
            "بناءً على {methodName}، فإن التقييم المقدر لـ {companyName} هو حوالي {value} {currencyCode}. "
            "يأخذ هذا في الاعتبار الأرقام المالية الرئيسية والافتراضات (بما في ذلك أي معايير مقدمة من "
            "المستخدم) لقطاع {sectorName} في {countryName}. يرجى مراجعة ملاحظات التوافق مع المعايير "
            "الدولية واستشارة متخصص."
        ),
        "report": {
            "title": "تقرير التقييم",
            "company_details": "تفاصيل الشركة",
            "company_name": "اسم الشركة",
            "country": "الدولة",
            "sector": "القطاع",
            "valuation_method": "طريقة التقييم",
            "currency": "العملة",
            "estimated_value": "القيمة المقدرة",
            "dcf_inputs_title": "مدخلات التدفقات النقدية المخصومة",
            "dcf_projection_years": "سنوات التوقع: {value} سنوات",
            "dcf_discount_rate": "معدل الخصم: {value}",
            "dcf_terminal_growth_rate": "معدل النمو النهائي: {value}",
            "benchmarks_title": "المعايير المقدمة من المستخدم",
            "summary": "الملخص",
            "chart": "الرسم البياني",
            "calculation_title": "تفاصيل الحساب",
            "ifrs_compliance_note": (
                "تم إعداد هذا التقرير لأغراض إعلامية. تتطلب التقييمات وفق المعيار الدولي لإعداد التقارير "
                "المالية 13 مدخلات سوقية قابلة للملاحظة وحكمًا مهنيًا؛ استشر مقيّمًا مؤهلًا قبل الاعتماد "
                "على هذه الأرقام."
            ),
        },
    },
}
